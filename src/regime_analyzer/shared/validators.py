"""Data validators for Regime Analyzer."""

import re

# Brazilian federative units (UF codes)
UFS = frozenset(
    {
        "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO",
        "MA", "MT", "MS", "MG", "PA", "PB", "PR", "PE", "PI",
        "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
    }
)


def normalize_uf(uf: str) -> str:
    """Strip whitespace and upper-case a UF code."""
    return re.sub(r"\s", "", uf).upper()


def validar_uf(uf: str) -> tuple[bool, str]:
    """Validate UF code and return reason if invalid.

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    codigo = normalize_uf(uf)

    if len(codigo) != 2:
        return False, f"UF deve ter 2 letras, tem {len(codigo)}"

    if codigo not in UFS:
        return False, f"UF desconhecida: {codigo}"

    return True, ""
