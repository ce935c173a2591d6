from flask import Flask

from src.config.settings import TestingConfig, get_config, setup_flask_config


def test_setup_flask_config_normalizes_base_path():
    app = Flask(__name__)

    setup_flask_config(app, 'testing', base_path='/summarizer/')

    assert app.config['BASE_PATH'] == '/summarizer'
    assert app.config['TESTING'] is True
    assert 'STATIC_URL' not in app.config


def test_unknown_config_name_falls_back_to_development():
    assert get_config('staging').DEBUG is True


def test_testing_config_has_no_credentials():
    config = TestingConfig()
    assert config.GEMINI_API_KEY is None
    assert config.OPENAI_API_KEY is None
    assert config.SMTP_HOST == ''


def test_routes_are_served_under_base_path(make_app):
    client = make_app(BASE_PATH='/summarizer').test_client()

    assert client.get('/summarizer/api/health').status_code == 200
    assert client.get('/api/health').status_code == 404
