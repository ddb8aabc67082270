"""
Couche services (cas d'utilisation).

Les services orchestrent la logique du domaine :
- code_extractor : calcul du nom normalise d'un fichier
- path_resolver : deconfliction du chemin cible
- scanner : collecte des fichiers video
- renamer : application des renommages par lot

Les services dependent des ports (interfaces) de core/, jamais des
implementations concretes de adapters/.
"""
