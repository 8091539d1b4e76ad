import pytest
from medprosana import create_app
from medprosana.extensions import db
from medprosana.client import ApiClient, ClinicClient


class FlaskTestSession:
    """Routes requests.Session-style calls into the Flask test client."""

    def __init__(self, test_client, base_url='http://localhost'):
        self.test_client = test_client
        self.base_url = base_url

    def request(self, method, url, json=None, timeout=None):
        path = url[len(self.base_url):] if url.startswith(self.base_url) else url
        return _TestResponse(self.test_client.open(path, method=method, json=json))


class _TestResponse:
    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code

    @property
    def ok(self):
        return self.status_code < 400

    @property
    def text(self):
        return self._response.get_data(as_text=True)

    def json(self):
        return self._response.get_json()


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def patient(client):
    response = client.post('/api/patients', json={
        'name': 'Amina',
        'familyname': 'Benali',
        'birthdate': '1961-04-12'
    })
    assert response.status_code == 201
    return response.get_json()['patient']


@pytest.fixture
def test_session(client):
    return FlaskTestSession(client)


@pytest.fixture
def api(test_session):
    return ApiClient('http://localhost/api', session=test_session)


@pytest.fixture
def clinic(api):
    return ClinicClient(api, max_workers=1)
