from datetime import timedelta
from conftest import create_request, expire_request, recruiter_payload
import routes.recruiter

def test_create_request_returns_token_and_expiry(client, store):
    response = client.post('/api/recruiter-request', json=recruiter_payload())

    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    data = body['data']
    assert data['candidateEmail'] == 'jane@x.com'
    assert data['expiresAt'].endswith('Z')
    assert len(data['token']) >= 32
    assert data['token'] != data['requestId']

    record = store.find_by_token(data['token'])
    assert record.id == data['requestId']
    assert record.status == 'pending'
    assert record.candidate_profile is None
    assert record.expires_at - record.created_at == timedelta(days=7)

def test_tokens_are_unique(client):
    tokens = {create_request(client)['token'] for _ in range(25)}
    assert len(tokens) == 25

def test_missing_required_field_is_rejected(client, store):
    response = client.post('/api/recruiter-request', json=recruiter_payload(candidateName=''))

    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'error': 'Missing required fields'}
    assert store.get_all() == []

def test_invalid_email_is_rejected(client):
    response = client.post('/api/recruiter-request', json=recruiter_payload(email='ada'))
    assert response.status_code == 400

def test_non_json_body_is_rejected(client):
    response = client.post('/api/recruiter-request', data='firstName=Ada',
                           content_type='application/x-www-form-urlencoded')
    assert response.status_code == 400
    assert response.get_json()['success'] is False

def test_invitation_link_embeds_token(client, monkeypatch):
    sent = []

    def fake_invitation(data):
        sent.append(data)
        return {'success': True}

    monkeypatch.setattr(routes.recruiter, 'send_candidate_invitation', fake_invitation)
    data = create_request(client)

    assert sent[0]['verification_link'] == f"https://kredible.test/candidate-form/{data['token']}"
    assert sent[0]['recruiter_name'] == 'Ada Lovelace'
    assert sent[0]['additional_notes'] == 'Looking forward to it!'

def test_invitation_failure_reports_error_but_keeps_record(client, store, monkeypatch):
    monkeypatch.setattr(routes.recruiter, 'send_candidate_invitation',
                        lambda data: {'success': False, 'error': 'The from address does not match a verified Sender Identity'})

    response = client.post('/api/recruiter-request', json=recruiter_payload())

    assert response.status_code == 500
    assert response.get_json()['error'] == (
        'Failed to send invitation email: The from address does not match a verified Sender Identity')
    assert len(store.get_all()) == 1

def test_confirmation_failure_does_not_fail_request(client, monkeypatch):
    monkeypatch.setattr(routes.recruiter, 'send_recruiter_confirmation',
                        lambda data: {'success': False, 'error': 'Failed to send confirmation email'})

    response = client.post('/api/recruiter-request', json=recruiter_payload())

    assert response.status_code == 200
    assert response.get_json()['success'] is True

def test_unexpected_error_returns_generic_500(client, monkeypatch):
    def explode(data):
        raise RuntimeError('provider SDK blew up')

    monkeypatch.setattr(routes.recruiter, 'send_candidate_invitation', explode)
    response = client.post('/api/recruiter-request', json=recruiter_payload())

    assert response.status_code == 500
    assert response.get_json() == {'success': False, 'error': 'Internal server error. Please try again.'}

def test_get_returns_redacted_view(client):
    data = create_request(client)

    response = client.get('/api/recruiter-request', query_string={'token': data['token']})

    assert response.status_code == 200
    view = response.get_json()['data']
    assert view['recruiterName'] == 'Ada Lovelace'
    assert view['recruiterCompany'] == 'Analytical Engines'
    assert view['candidateName'] == 'Jane Doe'
    assert view['candidateEmail'] == 'jane@x.com'
    assert view['positionTitle'] == 'Backend Engineer'
    assert view['additionalNotes'] == 'Looking forward to it!'
    assert view['status'] == 'pending'
    assert view['expiresAt'] == data['expiresAt']
    assert 'token' not in view
    assert 'recruiterEmail' not in view

def test_get_requires_token(client):
    response = client.get('/api/recruiter-request')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Token is required'

def test_get_rejects_blank_token(client):
    response = client.get('/api/recruiter-request', query_string={'token': '   '})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Token is required'

def test_get_unknown_token(client):
    response = client.get('/api/recruiter-request', query_string={'token': 'nope'})
    assert response.status_code == 404
    assert response.get_json()['error'] == 'Invalid or expired token'

def test_get_expired_token_deletes_request(client, store):
    data = create_request(client)
    expire_request(store, data['token'])

    response = client.get('/api/recruiter-request', query_string={'token': data['token']})
    assert response.status_code == 410
    assert response.get_json()['error'] == 'Token has expired'

    assert store.find_by_token(data['token']) is None
    response = client.get('/api/recruiter-request', query_string={'token': data['token']})
    assert response.status_code == 404
