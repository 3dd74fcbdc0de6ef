"""Static twelve-season palette table.

Rows are plain dictionaries validated by the season catalog when it loads;
importing this module has no side effects beyond building the table.
"""

from typing import Any, Dict, List


def _c(hex_value: str, name: str) -> Dict[str, str]:
    return {"hex": hex_value, "name": name}


SEASON_ROWS: List[Dict[str, Any]] = [
    # primavera
    {
        "id": "spring-light",
        "name": "Primavera",
        "subtype": "Clara",
        "main_season": "primavera",
        "short_description": "Delicada, luminosa e com brilho natural dourado.",
        "characteristics": {"temperature": "warm", "depth": "light", "chroma": "clear"},
        "colors": {
            "primary": [
                _c("#FFF8DC", "Creme Dourado"),
                _c("#FFEFD5", "Pêssego Pálido"),
                _c("#98FB98", "Verde Menta"),
                _c("#87CEEB", "Azul Céu"),
                _c("#FFB6C1", "Rosa Claro"),
                _c("#F0E68C", "Amarelo Palha"),
            ],
            "neutrals": [
                _c("#F5F5DC", "Bege Claro"),
                _c("#FFE4B5", "Mocassim"),
                _c("#DEB887", "Camurça"),
                _c("#8B7355", "Marrom Claro"),
            ],
            "accents": [
                _c("#FF7F50", "Coral"),
                _c("#FFD700", "Dourado"),
                _c("#40E0D0", "Turquesa Clara"),
                _c("#FFA07A", "Salmão"),
            ],
            "avoid": [
                _c("#000000", "Preto Puro"),
                _c("#4B0082", "Roxo Escuro"),
                _c("#800000", "Bordô"),
                _c("#2F4F4F", "Cinza Escuro"),
            ],
        },
    },
    {
        "id": "spring-warm",
        "name": "Primavera",
        "subtype": "Quente",
        "main_season": "primavera",
        "short_description": "Vibrante, ensolarada e cheia de calor dourado.",
        "characteristics": {"temperature": "warm", "depth": "medium", "chroma": "clear"},
        "colors": {
            "primary": [
                _c("#FF6347", "Tomate"),
                _c("#FFA500", "Laranja"),
                _c("#FFD700", "Ouro"),
                _c("#32CD32", "Verde Limão"),
                _c("#FF4500", "Laranja Vermelho"),
                _c("#FFDEAD", "Navajo"),
            ],
            "neutrals": [
                _c("#DEB887", "Camelo"),
                _c("#D2691E", "Chocolate"),
                _c("#F4A460", "Areia"),
                _c("#8B4513", "Sela"),
            ],
            "accents": [
                _c("#FF8C00", "Laranja Escuro"),
                _c("#FF1493", "Rosa Quente"),
                _c("#00CED1", "Turquesa"),
                _c("#ADFF2F", "Verde Amarelo"),
            ],
            "avoid": [
                _c("#000000", "Preto"),
                _c("#C0C0C0", "Prata"),
                _c("#4B0082", "Índigo"),
                _c("#708090", "Cinza Ardósia"),
            ],
        },
    },
    {
        "id": "spring-bright",
        "name": "Primavera",
        "subtype": "Brilhante",
        "main_season": "primavera",
        "short_description": "A mais vibrante - cores vivas e alto contraste.",
        "characteristics": {"temperature": "neutral-warm", "depth": "medium", "chroma": "bright"},
        "colors": {
            "primary": [
                _c("#FF1493", "Rosa Choque"),
                _c("#00FF7F", "Verde Spring"),
                _c("#00CED1", "Turquesa Brilhante"),
                _c("#FFD700", "Amarelo Ouro"),
                _c("#FF4500", "Laranja Red"),
                _c("#00BFFF", "Azul Céu Intenso"),
            ],
            "neutrals": [
                _c("#FFFAF0", "Branco Floral"),
                _c("#F5DEB3", "Trigo"),
                _c("#D2B48C", "Tan"),
                _c("#000000", "Preto"),
            ],
            "accents": [
                _c("#FF00FF", "Magenta"),
                _c("#7FFF00", "Chartreuse"),
                _c("#FF6B6B", "Coral Vivo"),
                _c("#4169E1", "Azul Royal"),
            ],
            "avoid": [
                _c("#808080", "Cinza Médio"),
                _c("#BC8F8F", "Rosado Empoeirado"),
                _c("#556B2F", "Oliva Escuro"),
                _c("#D8BFD8", "Malva"),
            ],
        },
    },
    # verão
    {
        "id": "summer-light",
        "name": "Verão",
        "subtype": "Claro",
        "main_season": "verão",
        "short_description": "Etérea, suave e com frescor rosado.",
        "characteristics": {"temperature": "cool", "depth": "light", "chroma": "muted"},
        "colors": {
            "primary": [
                _c("#E6E6FA", "Lavanda"),
                _c("#B0C4DE", "Azul Aço Claro"),
                _c("#FFB6C1", "Rosa Bebê"),
                _c("#ADD8E6", "Azul Claro"),
                _c("#DDA0DD", "Ameixa Clara"),
                _c("#F0FFF0", "Verde Orvalho"),
            ],
            "neutrals": [
                _c("#F5F5F5", "Branco Gelo"),
                _c("#DCDCDC", "Cinza Claro"),
                _c("#C4AEAD", "Rosa Acinzentado"),
                _c("#778899", "Cinza Ardósia Claro"),
            ],
            "accents": [
                _c("#9370DB", "Púrpura Médio"),
                _c("#87CEEB", "Azul Céu"),
                _c("#FFC0CB", "Rosa"),
                _c("#98D8C8", "Menta Suave"),
            ],
            "avoid": [
                _c("#FF4500", "Laranja"),
                _c("#FFD700", "Amarelo Ouro"),
                _c("#8B4513", "Marrom Quente"),
                _c("#000000", "Preto Puro"),
            ],
        },
    },
    {
        "id": "summer-soft",
        "name": "Verão",
        "subtype": "Suave",
        "main_season": "verão",
        "short_description": "Sofisticada, discreta e elegantemente neutra.",
        "characteristics": {"temperature": "neutral-cool", "depth": "medium", "chroma": "muted"},
        "colors": {
            "primary": [
                _c("#BC8F8F", "Rosa Antigo"),
                _c("#D8BFD8", "Malva"),
                _c("#B0C4DE", "Azul Aço Suave"),
                _c("#C0C0C0", "Prata"),
                _c("#A9A9A9", "Cinza Elegante"),
                _c("#CDB7B5", "Rosa Acinzentado"),
            ],
            "neutrals": [
                _c("#E8E4E1", "Greige"),
                _c("#C4B7A6", "Taupe"),
                _c("#9E9E9E", "Cinza Médio"),
                _c("#696969", "Cinza Dim"),
            ],
            "accents": [
                _c("#8B7D7B", "Castor"),
                _c("#9370DB", "Roxo Médio"),
                _c("#5F9EA0", "Cadet Blue"),
                _c("#CD5C5C", "Rosa Indiano"),
            ],
            "avoid": [
                _c("#FF0000", "Vermelho Vivo"),
                _c("#00FF00", "Verde Neon"),
                _c("#FF8C00", "Laranja Escuro"),
                _c("#000000", "Preto Puro"),
            ],
        },
    },
    {
        "id": "summer-cool",
        "name": "Verão",
        "subtype": "Frio",
        "main_season": "verão",
        "short_description": "Distintamente fria com capacidade para intensidade.",
        "characteristics": {"temperature": "cool", "depth": "medium", "chroma": "clear"},
        "colors": {
            "primary": [
                _c("#4169E1", "Azul Royal"),
                _c("#9370DB", "Roxo Médio"),
                _c("#FF69B4", "Rosa Intenso"),
                _c("#20B2AA", "Turquesa Claro"),
                _c("#DB7093", "Rosa Violeta"),
                _c("#6A5ACD", "Azul Ardósia"),
            ],
            "neutrals": [
                _c("#FFFFFF", "Branco Puro"),
                _c("#C0C0C0", "Prata"),
                _c("#708090", "Cinza Ardósia"),
                _c("#2F4F4F", "Cinza Escuro Frio"),
            ],
            "accents": [
                _c("#BA55D3", "Orquídea"),
                _c("#00CED1", "Turquesa"),
                _c("#FF1493", "Rosa Choque Frio"),
                _c("#4682B4", "Azul Aço"),
            ],
            "avoid": [
                _c("#FF8C00", "Laranja"),
                _c("#8B4513", "Marrom Quente"),
                _c("#FFD700", "Ouro"),
                _c("#F0E68C", "Cáqui"),
            ],
        },
    },
    # outono
    {
        "id": "autumn-soft",
        "name": "Outono",
        "subtype": "Suave",
        "main_season": "outono",
        "short_description": "Terrosa, sofisticada e suavemente quente.",
        "characteristics": {"temperature": "neutral-warm", "depth": "medium", "chroma": "muted"},
        "colors": {
            "primary": [
                _c("#D2B48C", "Tan"),
                _c("#DEB887", "Camurça"),
                _c("#F5DEB3", "Trigo"),
                _c("#BDB76B", "Cáqui Escuro"),
                _c("#BC8F8F", "Rosa Outonal"),
                _c("#8FBC8F", "Verde Mar Escuro"),
            ],
            "neutrals": [
                _c("#E8DCC4", "Creme Quente"),
                _c("#C4B7A6", "Greige Quente"),
                _c("#8B7D6B", "Marrom Suave"),
                _c("#5C4033", "Café"),
            ],
            "accents": [
                _c("#CD853F", "Peru"),
                _c("#B8860B", "Dourado Escuro"),
                _c("#6B8E23", "Verde Oliva"),
                _c("#9ACD32", "Verde Amarelo"),
            ],
            "avoid": [
                _c("#FF1493", "Rosa Choque"),
                _c("#0000FF", "Azul Puro"),
                _c("#000000", "Preto"),
                _c("#FF00FF", "Magenta"),
            ],
        },
    },
    {
        "id": "autumn-warm",
        "name": "Outono",
        "subtype": "Quente",
        "main_season": "outono",
        "short_description": "Rico, saturado e gloriosamente dourado.",
        "characteristics": {"temperature": "warm", "depth": "medium", "chroma": "clear"},
        "colors": {
            "primary": [
                _c("#CD853F", "Peru"),
                _c("#B8860B", "Dourado Escuro"),
                _c("#8B4513", "Chocolate"),
                _c("#DAA520", "Âmbar"),
                _c("#556B2F", "Verde Oliva Escuro"),
                _c("#A0522D", "Sienna"),
            ],
            "neutrals": [
                _c("#F5F5DC", "Bege"),
                _c("#D2691E", "Chocolate Médio"),
                _c("#8B7355", "Marrom Médio"),
                _c("#3D2B1F", "Café Escuro"),
            ],
            "accents": [
                _c("#FF6347", "Tomate"),
                _c("#228B22", "Verde Floresta"),
                _c("#FF8C00", "Laranja Escuro"),
                _c("#B22222", "Tijolo"),
            ],
            "avoid": [
                _c("#C0C0C0", "Prata"),
                _c("#4169E1", "Azul Royal"),
                _c("#FF69B4", "Rosa Frio"),
                _c("#E6E6FA", "Lavanda"),
            ],
        },
    },
    {
        "id": "autumn-deep",
        "name": "Outono",
        "subtype": "Profundo",
        "main_season": "outono",
        "short_description": "Dramática, intensa e profundamente rica.",
        "characteristics": {"temperature": "neutral-warm", "depth": "deep", "chroma": "muted"},
        "colors": {
            "primary": [
                _c("#8B0000", "Vermelho Escuro"),
                _c("#A0522D", "Sienna"),
                _c("#556B2F", "Verde Oliva Escuro"),
                _c("#2F4F4F", "Cinza Ardósia Escuro"),
                _c("#8B4513", "Marrom Sela"),
                _c("#191970", "Azul Meia-noite"),
            ],
            "neutrals": [
                _c("#F5F5DC", "Marfim"),
                _c("#5C4033", "Café"),
                _c("#3D2B1F", "Bistre"),
                _c("#000000", "Preto"),
            ],
            "accents": [
                _c("#800020", "Borgonha"),
                _c("#006400", "Verde Escuro"),
                _c("#4B0082", "Índigo Quente"),
                _c("#B8860B", "Ouro Velho"),
            ],
            "avoid": [
                _c("#FFB6C1", "Rosa Claro"),
                _c("#E6E6FA", "Lavanda"),
                _c("#87CEEB", "Azul Céu"),
                _c("#98FB98", "Verde Menta"),
            ],
        },
    },
    # inverno
    {
        "id": "winter-cool",
        "name": "Inverno",
        "subtype": "Frio",
        "main_season": "inverno",
        "short_description": "Gelada, sofisticada e elegantemente fria.",
        "characteristics": {"temperature": "cool", "depth": "medium", "chroma": "clear"},
        "colors": {
            "primary": [
                _c("#000080", "Marinho"),
                _c("#DC143C", "Carmesim"),
                _c("#4B0082", "Índigo"),
                _c("#008B8B", "Teal Escuro"),
                _c("#FF1493", "Rosa Choque"),
                _c("#FFFFFF", "Branco Puro"),
            ],
            "neutrals": [
                _c("#FFFFFF", "Branco Puro"),
                _c("#C0C0C0", "Prata"),
                _c("#696969", "Cinza"),
                _c("#000000", "Preto"),
            ],
            "accents": [
                _c("#9400D3", "Violeta"),
                _c("#00CED1", "Turquesa Fria"),
                _c("#FF0080", "Magenta Frio"),
                _c("#4169E1", "Azul Royal"),
            ],
            "avoid": [
                _c("#FF8C00", "Laranja"),
                _c("#DAA520", "Dourado"),
                _c("#8B4513", "Marrom"),
                _c("#F0E68C", "Cáqui"),
            ],
        },
    },
    {
        "id": "winter-deep",
        "name": "Inverno",
        "subtype": "Profundo",
        "main_season": "inverno",
        "short_description": "Rica, dramática e intensamente profunda.",
        "characteristics": {"temperature": "neutral-cool", "depth": "deep", "chroma": "clear"},
        "colors": {
            "primary": [
                _c("#191970", "Azul Meia-noite"),
                _c("#800000", "Marrom Bordô"),
                _c("#006400", "Verde Escuro"),
                _c("#2F4F4F", "Cinza Ardósia"),
                _c("#800020", "Borgonha"),
                _c("#4B0082", "Índigo Profundo"),
            ],
            "neutrals": [
                _c("#FFFAFA", "Branco Neve"),
                _c("#808080", "Cinza"),
                _c("#2F2F2F", "Carvão"),
                _c("#000000", "Preto"),
            ],
            "accents": [
                _c("#8B0000", "Vermelho Escuro"),
                _c("#008080", "Teal"),
                _c("#483D8B", "Azul Ardósia Escuro"),
                _c("#228B22", "Verde Floresta"),
            ],
            "avoid": [
                _c("#FFDAB9", "Pêssego"),
                _c("#FFE4B5", "Mocassim"),
                _c("#F0E68C", "Cáqui"),
                _c("#DDA0DD", "Ameixa Clara"),
            ],
        },
    },
    {
        "id": "winter-bright",
        "name": "Inverno",
        "subtype": "Brilhante",
        "main_season": "inverno",
        "short_description": "Vibrante, contrastante e intensamente brilhante.",
        "characteristics": {"temperature": "neutral-cool", "depth": "medium", "chroma": "bright"},
        "colors": {
            "primary": [
                _c("#FF0000", "Vermelho Puro"),
                _c("#0000FF", "Azul Puro"),
                _c("#FF00FF", "Magenta"),
                _c("#00FFFF", "Ciano"),
                _c("#FFFF00", "Amarelo Limão"),
                _c("#00FF00", "Verde Limão"),
            ],
            "neutrals": [
                _c("#FFFFFF", "Branco Puro"),
                _c("#C0C0C0", "Prata"),
                _c("#808080", "Cinza"),
                _c("#000000", "Preto"),
            ],
            "accents": [
                _c("#FF1493", "Rosa Choque"),
                _c("#4169E1", "Azul Royal"),
                _c("#32CD32", "Verde Lima"),
                _c("#9400D3", "Violeta Escuro"),
            ],
            "avoid": [
                _c("#DEB887", "Camurça"),
                _c("#D8BFD8", "Malva"),
                _c("#F5DEB3", "Trigo"),
                _c("#BC8F8F", "Rosa Empoeirado"),
            ],
        },
    },
]


__all__ = ["SEASON_ROWS"]
