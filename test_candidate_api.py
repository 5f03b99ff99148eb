from conftest import create_request, expire_request

def submit(client, token, **profile):
    return client.post('/api/candidate-submit', json=dict(profile, token=token))

def test_submission_completes_request(client, store):
    data = create_request(client, candidateEmail='jane@x.com')

    response = submit(client, data['token'], githubUsername='janedoe')

    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['data']['requestId'] == data['requestId']
    assert body['data']['candidateName'] == 'Jane Doe'
    assert body['data']['submittedAt'].endswith('Z')

    record = store.find_by_token(data['token'])
    assert record.status == 'completed'
    assert record.candidate_profile.github_username == 'janedoe'

def test_full_submission_is_stored(client, store):
    data = create_request(client)

    response = submit(
        client, data['token'],
        fullName='Jane Q. Doe',
        githubUsername='janedoe',
        linkedinUrl='https://www.linkedin.com/in/janedoe',
        stackoverflowUrl='https://stackoverflow.com/users/42/janedoe',
        portfolioUrl='https://janedoe.dev',
        additionalProfiles=['https://dev.to/jane', '', '   ', 'https://kaggle.com/jane'],
        additionalInfo='Happy to chat anytime.',
    )
    assert response.status_code == 200

    profile = store.find_by_token(data['token']).candidate_profile.to_dict()
    assert profile['fullName'] == 'Jane Q. Doe'
    assert profile['linkedinUrl'] == 'https://www.linkedin.com/in/janedoe'
    assert profile['stackoverflowUrl'] == 'https://stackoverflow.com/users/42/janedoe'
    assert profile['portfolioUrl'] == 'https://janedoe.dev'
    assert profile['additionalProfiles'] == ['https://dev.to/jane', 'https://kaggle.com/jane']
    assert profile['additionalInfo'] == 'Happy to chat anytime.'

def test_bad_url_is_rejected_and_request_stays_pending(client, store):
    data = create_request(client)

    response = submit(client, data['token'], linkedinUrl='ftp://bad')

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Invalid LinkedIn URL format'
    record = store.find_by_token(data['token'])
    assert record.status == 'pending'
    assert record.candidate_profile is None

def test_profile_required_even_with_other_fields(client):
    data = create_request(client)

    response = submit(client, data['token'], fullName='Jane Doe',
                      stackoverflowUrl='https://stackoverflow.com/users/42/janedoe',
                      additionalProfiles=['https://dev.to/jane'],
                      additionalInfo='Hi')

    assert response.status_code == 400
    assert response.get_json()['error'] == 'At least one professional profile is required'

def test_portfolio_alone_is_enough(client):
    data = create_request(client)
    response = submit(client, data['token'], portfolioUrl='https://janedoe.dev')
    assert response.status_code == 200

def test_missing_token(client):
    response = client.post('/api/candidate-submit', json={'githubUsername': 'janedoe'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Token is required'

def test_unknown_token(client):
    response = submit(client, 'not-a-real-token', githubUsername='janedoe')
    assert response.status_code == 404
    assert response.get_json()['error'] == 'Invalid or expired token'

def test_expired_token_is_rejected_and_removed(client, store):
    data = create_request(client)
    expire_request(store, data['token'])

    response = submit(client, data['token'], githubUsername='janedoe')
    assert response.status_code == 410
    assert response.get_json()['error'] == 'Token has expired'

    assert store.find_by_token(data['token']) is None
    assert submit(client, data['token'], githubUsername='janedoe').status_code == 404
    assert client.get('/api/candidate-submit', query_string={'token': data['token']}).status_code == 404

def test_resubmission_is_a_conflict(client, store):
    data = create_request(client)
    assert submit(client, data['token'], githubUsername='janedoe').status_code == 200

    response = submit(client, data['token'], githubUsername='someone-else')

    assert response.status_code == 409
    assert response.get_json()['error'] == 'This verification has already been completed'
    assert store.find_by_token(data['token']).candidate_profile.github_username == 'janedoe'

def test_submission_leaves_other_requests_untouched(client):
    first = create_request(client, candidateName='Jane Doe', candidateEmail='jane@x.com')
    second = create_request(client, candidateName='John Roe', candidateEmail='john@y.com',
                            positionTitle='Data Engineer')
    before = client.get('/api/candidate-submit', query_string={'token': second['token']}).get_json()

    assert submit(client, first['token'], githubUsername='janedoe').status_code == 200

    after = client.get('/api/candidate-submit', query_string={'token': second['token']}).get_json()
    assert after == before
    assert after['data']['candidateName'] == 'John Roe'
    assert after['data']['status'] == 'pending'

def test_token_validation(client):
    data = create_request(client)

    response = client.get('/api/candidate-submit', query_string={'token': data['token']})

    assert response.status_code == 200
    view = response.get_json()['data']
    assert view['recruiterName'] == 'Ada Lovelace'
    assert view['positionTitle'] == 'Backend Engineer'

    assert client.get('/api/candidate-submit').status_code == 400

def test_completed_token_still_validates_with_status(client):
    data = create_request(client)
    submit(client, data['token'], githubUsername='janedoe')

    response = client.get('/api/candidate-submit', query_string={'token': data['token']})

    assert response.status_code == 200
    assert response.get_json()['data']['status'] == 'completed'
