"""
Interface ligne de commande (Typer + Rich).

- commands/ : sous-applications `movies` et `tv`
- display : rendu Rich des curseurs et enregistrements TMDB
- helpers : injection du client, gestion des erreurs, console partagee
"""
