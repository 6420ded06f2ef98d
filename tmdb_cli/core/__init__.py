"""
Couche domaine (core).

Contient les enregistrements types decodes depuis l'API TMDB.
Cette couche n'a AUCUNE dependance vers l'infrastructure (httpx, CLI).

Sous-packages :
- entities/ : Films, series, credits, critiques et enregistrements partages
"""
