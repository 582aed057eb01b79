def test_state_endpoint(client):
    res = client.get('/api/state')
    assert res.status_code == 200
    body = res.get_json()
    assert body['success'] is True
    state = body['state']
    assert state['phase'] == 'waiting_for_ready'
    assert state['total_rounds'] == 2
    assert state['round']['first_letter'] == 'C'
    assert state['round']['target_word'] is None


def test_ready_is_queued_until_tick(client, flask_app):
    res = client.post('/api/ready')
    assert res.status_code == 200
    assert res.get_json()['queued'] == 'ready'
    assert client.get('/api/state').get_json()['state']['phase'] == 'waiting_for_ready'

    flask_app.game_service.tick(0)

    assert client.get('/api/state').get_json()['state']['phase'] == 'waiting_for_player_guess'


def test_guess_requires_payload(client):
    res = client.post('/api/guess', json={})
    assert res.status_code == 400
    assert res.get_json()['success'] is False

    res = client.post('/api/guess', data='not json', content_type='text/plain')
    assert res.status_code == 400


def test_correct_guess_scores_and_moves_on(client, flask_app):
    client.post('/api/ready')
    client.post('/api/guess', json={'guess': 'crane'})
    flask_app.game_service.tick(0)

    state = client.get('/api/state').get_json()['state']
    assert state['player1_score'] == 150
    assert state['round_number'] == 2
    assert state['round']['first_letter'] == 'A'
    assert state['round']['target_word'] is None


def test_skip_and_reset(client, flask_app):
    client.post('/api/ready')
    client.post('/api/skip')
    flask_app.game_service.tick(0)
    assert client.get('/api/state').get_json()['state']['round']['attempts_used'] == 1

    client.post('/api/reset')
    flask_app.game_service.tick(0)
    state = client.get('/api/state').get_json()['state']
    assert state['phase'] == 'waiting_for_ready'
    assert state['round']['attempts_used'] == 0


def test_health(client):
    body = client.get('/api/health').get_json()
    assert body['status'] == 'healthy'
    assert body['phase'] == 'waiting_for_ready'
    assert body['tick_loop_running'] is False
