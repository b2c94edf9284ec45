"""Interface web FastAPI du catalogue (routes, templates Jinja2, fichiers statiques)."""
