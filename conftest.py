from datetime import timedelta
import pytest
from app import create_app
from models import db, RecruiterRequest, CandidateProfile
from services import get_storage
from utils.helpers import generate_request_id, generate_access_token, utcnow

TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'BASE_URL': 'https://kredible.test',
    'SENDGRID_API_KEY': '',
    'MAIL_SERVER': None,
    'DASHBOARD_API_KEY': '',
    'ENABLE_DEBUG_ROUTES': True,
}

def make_app(tmp_path, **overrides):
    config = dict(TEST_CONFIG, STORAGE_FILE=str(tmp_path / 'storage.json'))
    config.update(overrides)
    return create_app(config)

@pytest.fixture(params=['database', 'file'])
def app(request, tmp_path):
    """App running against each storage backend"""
    app = make_app(tmp_path, STORAGE_BACKEND=request.param)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def store(app):
    return get_storage()

def recruiter_payload(**overrides):
    payload = {
        'firstName': 'Ada',
        'lastName': 'Lovelace',
        'email': 'ada@analytical.io',
        'company': 'Analytical Engines',
        'jobTitle': 'Head of Talent',
        'companySize': '11-50',
        'candidateEmail': 'jane@x.com',
        'candidateName': 'Jane Doe',
        'positionTitle': 'Backend Engineer',
        'additionalNotes': 'Looking forward to it!',
    }
    payload.update(overrides)
    return payload

def create_request(client, **overrides):
    """POST a recruiter request and return its response data"""
    response = client.post('/api/recruiter-request', json=recruiter_payload(**overrides))
    assert response.status_code == 200, response.get_json()
    return response.get_json()['data']

def expire_request(store, token):
    record = store.find_by_token(token)
    record.expires_at = utcnow() - timedelta(minutes=1)
    store.save(record)

def make_record(**overrides):
    """Unsaved pending request with valid field values"""
    now = utcnow()
    fields = dict(
        id=generate_request_id(),
        token=generate_access_token(),
        first_name='Ada',
        last_name='Lovelace',
        email='ada@analytical.io',
        company='Analytical Engines',
        job_title='Head of Talent',
        candidate_name='Jane Doe',
        candidate_email='jane@x.com',
        position_title='Backend Engineer',
        status='pending',
        created_at=now,
        expires_at=now + timedelta(days=7),
    )
    fields.update(overrides)
    return RecruiterRequest(**fields)

def complete(record):
    record.candidate_profile = CandidateProfile(
        github_username='janedoe',
        additional_profiles=['https://dev.to/jane'],
        submitted_at=utcnow(),
    )
    record.status = 'completed'
    return record
