"""
CtrOrg - Identification et tri des dumps de cartouches Nintendo 3DS.

Ce package lit l'en-tete binaire des fichiers .3ds / .cia, en extrait le
title ID, le rapproche d'un catalogue de releases et copie chaque fichier
sous le nom de la variante regionale preferee.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, exceptions)
- services/ : Couche application (decodage, index, resolution, orchestration)
- adapters/ : Couche infrastructure (CLI, systeme de fichiers, catalogues)
"""
