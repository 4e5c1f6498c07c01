# rubik_algebra/core/errors.py
from __future__ import annotations


class ContractViolation(ValueError):
    """Argumento que rompe un invariante del álgebra del cubo.

    No es un error recuperable: indica un defecto en quien llama
    (un sticker que no está sobre su cara, un eje que no es unitario, etc.).
    """
