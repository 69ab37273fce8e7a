from api.index import create_app

# Exported `app` is the WSGI entrypoint.
app = create_app()
