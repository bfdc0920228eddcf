"""
The built-in mansion: seven rooms and the suspects behind their clues.
"""

from typing import Any, Dict

MANSION_ROOMS: Dict[str, Any] = {
    "name": "Hall de Entrada",
    "clue": "Pegadas de lama",
    "left": {
        "name": "Sala de Estar",
        "clue": "Livro com página faltando",
        "left": {"name": "Cozinha", "clue": "Chave perdida"},
        "right": {"name": "Biblioteca"},
    },
    "right": {
        "name": "Corredor",
        "left": {"name": "Quarto", "clue": "Lençol manchado"},
        "right": {"name": "Jardim", "clue": "Gaveta perdida"},
    },
}

# Clue -> suspect, in insertion order
CLUE_SUSPECTS: Dict[str, str] = {
    "Pegadas de lama": "Jardineiro",
    "Gaveta perdida": "Jardineiro",
    "Chave perdida": "Empregado",
    "Lençol manchado": "Empregado",
    "Livro com página faltando": "Bibliotecário",
}
