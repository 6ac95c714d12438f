#setup: pip install -e .
#setup: flask --app wealthplanner.wsgi run --port 4000 --debug

from wealthplanner.app import create_app
from wealthplanner.config import load_settings

settings = load_settings()
app = create_app(settings)


if __name__ == "__main__":
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
