"""
Tests for the application factory and its single home route
"""

import importlib
import json
import os
import pytest
from unittest.mock import patch

from api.index import create_app
from app_core.config import Settings


@pytest.fixture
def client():
    """Test client for the app built with default settings"""
    app = create_app(Settings())
    app.config['TESTING'] = True
    return app.test_client()


class TestHomeRoute:
    """Tests for GET /"""

    def test_root_returns_greeting(self, client):
        response = client.get('/')

        assert response.status_code == 200
        assert response.data == b'Hello, World!!!\n'
        assert response.content_type == 'text/plain; charset=utf-8'

    def test_root_head_request(self, client):
        response = client.head('/')

        assert response.status_code == 200
        assert response.data == b''

    def test_root_with_valid_json_body(self, client):
        response = client.get('/', json={'hello': 'world'})

        assert response.status_code == 200
        assert response.data == b'Hello, World!!!\n'

    def test_root_with_malformed_json_body(self, client):
        response = client.get('/', data='{"hello": world}', content_type='application/json')

        assert response.status_code == 400
        assert json.loads(response.data)['status'] == 400

    def test_post_to_root_not_allowed(self, client):
        response = client.post('/')

        assert response.status_code == 405
        assert json.loads(response.data)['status'] == 405

    def test_only_root_route_registered(self):
        app = create_app(Settings())
        rules = [r.rule for r in app.url_map.iter_rules() if r.endpoint != 'static']

        assert rules == ['/']


class TestRoutingMisses:
    """Tests for paths with no route"""

    @pytest.mark.parametrize('path', ['/user', '/users/1', '/index.html', '/api/health'])
    def test_unknown_path_returns_404(self, client, path):
        response = client.get(path)

        assert response.status_code == 404
        data = json.loads(response.data)
        assert data['status'] == 404
        assert data['error']


class TestErrorHandling:
    """Tests for the JSON error handlers"""

    def test_unhandled_exception_hides_details(self):
        app = create_app(Settings())
        app.config['TESTING'] = True

        with patch.object(app.logger, 'error') as mock_error:
            with patch.dict(app.view_functions, {'root': lambda: 1 / 0}):
                response = app.test_client().get('/')

        assert response.status_code == 500
        data = json.loads(response.data)
        assert data == {'error': 'Internal server error', 'status': 500}
        mock_error.assert_called_once()
        assert 'ZeroDivisionError' in mock_error.call_args[0][0]


class TestCors:
    """Tests for cross-origin headers"""

    def test_wildcard_origin_by_default(self, client):
        response = client.get('/', headers={'Origin': 'https://example.com'})

        # flask-cors either sends the wildcard or echoes the origin
        assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'https://example.com')

    def test_configured_origin(self):
        app = create_app(Settings(cors_origins=('https://allowed.example.com',)))
        client = app.test_client()

        allowed = client.get('/', headers={'Origin': 'https://allowed.example.com'})
        denied = client.get('/', headers={'Origin': 'https://other.example.com'})

        assert allowed.headers.get('Access-Control-Allow-Origin') == 'https://allowed.example.com'
        assert 'Access-Control-Allow-Origin' not in denied.headers


class TestWsgiEntrypoint:
    """Tests for the module-level WSGI app"""

    @patch('app_core.config.load_dotenv')
    def test_wsgi_app_serves_root(self, mock_load_dotenv):
        with patch.dict(os.environ, {}, clear=True):
            import api.wsgi
            wsgi = importlib.reload(api.wsgi)

        response = wsgi.app.test_client().get('/')

        assert response.status_code == 200
        assert response.data == b'Hello, World!!!\n'
