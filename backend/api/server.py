import logging
import uvicorn
from dotenv import load_dotenv

from api.main import configure_logging, create_app
from config.settings import load_settings

logger = logging.getLogger(__name__)

def main():
    # Load .env into the process so OPENAI_API_KEY etc. are visible everywhere
    load_dotenv()

    settings = load_settings()
    configure_logging(settings)

    app = create_app(settings)
    logger.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    main()
