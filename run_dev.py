"""Simple development runner that imports the app factory and runs the Flask dev server.
Use this for local development only; HOST, PORT and DEBUG come from the environment or .env.
"""
from champions import create_app
from champions.config import settings

if __name__ == '__main__':
    app = create_app()
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG)
