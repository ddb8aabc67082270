"""
Couche domaine (core).

Contient les erreurs metier et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
"""
