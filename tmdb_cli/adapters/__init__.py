"""
Couche adaptateurs (infrastructure).

Sous-packages :
- api/ : Client HTTP TMDB (transport, curseurs, handlers films et series)
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
