"""
Flask application for Meeting Summarizer.
Wires configuration, services and API blueprints into an application factory.
"""
from flask import Flask, render_template
import os
import logging
from typing import Any, Dict, Optional

# Import configuration
from src.config.settings import setup_flask_config, get_base_path, get_log_dir

# Import AI provider chain
from src.ai.gateway import SummarizationGateway, build_provider_chain
from src.ai.prompts import PROMPT_TEMPLATES

# Import artifact store
from src.database.memory_store import SummaryStore

# Import services
from src.services.email_dispatcher import DEFAULT_SUBJECT, EmailDispatcher
from src.services.email_service import EmailService
from src.services.summary_service import SummaryService
from src.services.upload_service import UploadService

# Import API routes
from src.api import register_all_routes

logger = logging.getLogger(__name__)


def configure_logging(log_dir: Optional[str] = None):
    """Configure root logging with a file handler and console output."""
    log_dir = log_dir or get_log_dir()
    os.makedirs(log_dir, exist_ok=True)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(os.path.join(log_dir, 'flask_app.log')),
            logging.StreamHandler()
        ]
    )


def create_flask_app(config_name: Optional[str] = None, config_overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """Create and configure Flask application."""
    base_path = (config_overrides or {}).get('BASE_PATH', get_base_path())

    app = Flask(__name__,
                static_url_path=f'{base_path}/static',
                template_folder='templates')

    # Setup configuration
    setup_flask_config(app, config_name, base_path)
    if config_overrides:
        app.config.update(config_overrides)

    logger.info(f"Flask app created with base path: {base_path or '/'}")
    return app


def initialize_services(app: Flask, **overrides) -> Dict[str, Any]:
    """
    Initialize all services and dependencies.

    Args:
        app: Configured Flask application
        **overrides: Optional replacements for 'store', 'dispatcher' or
            'providers' (used by tests)

    Returns:
        Dictionary of service instances
    """
    config = app.config
    logger.info("Initializing services...")

    store = overrides.get('store') or SummaryStore()

    providers = overrides.get('providers')
    if providers is None:
        providers = build_provider_chain(
            gemini_api_key=config.get('GEMINI_API_KEY'),
            openai_api_key=config.get('OPENAI_API_KEY'),
            gemini_model=config.get('GEMINI_MODEL', 'gemini-1.5-flash'),
            openai_model=config.get('OPENAI_MODEL', 'gpt-4o'),
            request_timeout=config.get('LLM_REQUEST_TIMEOUT', 120)
        )
    gateway = SummarizationGateway(providers)
    logger.info(f"AI mode: {gateway.mode()}")

    dispatcher = overrides.get('dispatcher') or EmailDispatcher(
        smtp_host=config.get('SMTP_HOST'),
        smtp_port=config.get('SMTP_PORT', 587),
        username=config.get('SMTP_USERNAME'),
        password=config.get('SMTP_PASSWORD'),
        sender_email=config.get('EMAIL_FROM'),
        sender_name=config.get('EMAIL_FROM_NAME', 'AI Meeting Notes'),
        use_ssl=config.get('SMTP_USE_SSL', False),
        outbox_dir=config.get('EMAIL_OUTBOX_DIR', os.path.join('data', 'outbox'))
    )

    services = {
        'store': store,
        'gateway': gateway,
        'summary_service': SummaryService(store, gateway),
        'upload_service': UploadService(config.get('MAX_UPLOAD_SIZE', 10 * 1024 * 1024)),
        'email_service': EmailService(store, dispatcher),
    }

    logger.info("All services initialized successfully")
    return services


def register_core_routes(app: Flask, services: Dict[str, Any]):
    """Register core application routes."""
    base_path = app.config['BASE_PATH']
    store = services['store']

    @app.route(f'{base_path}/')
    def index():
        """Summarizer wizard interface."""
        return render_template('index.html', config={
            'basePath': base_path,
            'promptTemplates': PROMPT_TEMPLATES,
            'defaultSubject': DEFAULT_SUBJECT,
        })

    @app.route(f'{base_path}/api/health')
    def health():
        """Liveness check with store counters."""
        return {
            'success': True,
            'status': 'ok',
            'summaries': store.summary_count(),
            'emailLogs': store.email_log_count(),
        }

    logger.info(f"Core routes registered with base path: {base_path or '/'}")


def create_app(config_overrides: Optional[Dict[str, Any]] = None, config_name: Optional[str] = None, **service_overrides) -> Flask:
    """
    Build the complete application.

    Args:
        config_overrides: Values applied on top of the selected configuration
        config_name: 'development', 'production' or 'testing'
        **service_overrides: Passed to initialize_services

    Returns:
        Flask application with services attached as app.extensions['summarizer']
    """
    app = create_flask_app(config_name, config_overrides)
    services = initialize_services(app, **service_overrides)
    app.extensions['summarizer'] = services

    register_core_routes(app, services)
    register_all_routes(app, app.config['BASE_PATH'], services)

    logger.info("Application setup completed successfully")
    return app


# Development server entry point
if __name__ == '__main__':
    configure_logging()
    application = create_app()
    logger.info(f"Starting development server with base path: {application.config['BASE_PATH'] or '/'}")
    application.run(debug=application.config.get('DEBUG', False))
