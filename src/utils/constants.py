"""
Constantes globales pour CtrOrg.

Ce module contient les constantes utilisees dans l'application:
- Extensions des dumps reconnus
- Caracteres interdits dans les noms de fichiers de sortie
- Disposition par defaut de l'en-tete 3DS (offsets et tags magiques)
"""

# Extensions des dumps 3DS reconnues (insensible a la casse)
GAME_EXTENSIONS = frozenset({
    ".3ds",
    ".cia",
})

# Caracteres retires des noms d'affichage avant la copie
FORBIDDEN_FILENAME_CHARS = frozenset({"\\", "/", ":", "*", '"', "<", ">", "|"})

# En-tete NCSD (image de carte .3ds)
NCSD_MAGIC_OFFSET = 0x100
NCSD_TITLE_ID_OFFSET = 0x108

# En-tete NCCH (contenu d'un CIA)
NCCH_MAGIC_OFFSET = 0x3A40
NCCH_TITLE_ID_OFFSET = 0x3A48

# Longueur d'un tag magique
MAGIC_SIZE = 4
