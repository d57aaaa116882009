import pytest

from school_clearance.utils import StoreError

from tests.conftest import ADMIN


class TestAuth:

    def test_login_sets_cookie(self, client):
        response = client.post('/api/auth/login', json=ADMIN)
        assert response.status_code == 200
        assert response.get_json()['ok'] is True
        assert 'school_auth_token=authenticated' in response.headers['Set-Cookie']

        check = client.get('/api/auth/check')
        assert check.get_json()['data']['authenticated'] is True

    def test_login_accepts_form_data(self, client):
        response = client.post('/api/auth/login', data=ADMIN)
        assert response.status_code == 200

    def test_wrong_password(self, client):
        response = client.post('/api/auth/login', json={'email': ADMIN['email'], 'password': 'nope'})
        assert response.status_code == 401
        assert response.get_json()['ok'] is False

    def test_missing_fields(self, client):
        response = client.post('/api/auth/login', json={'email': ADMIN['email']})
        assert response.status_code == 400

    def test_unconfigured_admin_rejects_login(self, app, client):
        app.config['ADMIN_PASSWORD'] = None
        response = client.post('/api/auth/login', json=ADMIN)
        assert response.status_code == 401

    def test_logout_clears_cookie(self, auth_client):
        auth_client.post('/api/auth/logout')
        check = auth_client.get('/api/auth/check')
        assert check.get_json()['data']['authenticated'] is False
        assert auth_client.get('/api/departments').status_code == 401

    @pytest.mark.parametrize('method, url', [
        ('get', '/api/departments'),
        ('post', '/api/departments'),
        ('get', '/api/items'),
        ('get', '/api/student-clearances'),
        ('get', '/api/students/1/clearance'),
        ('post', '/api/students/1/clearance/decisions'),
    ])
    def test_protected_endpoints(self, client, method, url):
        response = getattr(client, method)(url)
        assert response.status_code == 401
        assert response.get_json()['ok'] is False


def create_department(client, name, officer_name='Grace Owusu', officer_title='Head Librarian'):
    response = client.post('/api/departments', json={
        'name': name, 'officer_name': officer_name, 'officer_title': officer_title,
    })
    assert response.status_code == 201
    return response.get_json()['data']['id']


class TestDepartmentRoutes:

    def test_crud(self, auth_client):
        department_id = create_department(auth_client, 'Library')

        listed = auth_client.get('/api/departments').get_json()['data']
        assert [d['name'] for d in listed] == ['Library']

        response = auth_client.put(f'/api/departments/{department_id}', json={
            'name': 'Main Library', 'officer_name': 'Yaw Asante', 'officer_title': 'Librarian',
        })
        assert response.status_code == 200
        fetched = auth_client.get(f'/api/departments/{department_id}').get_json()['data']
        assert fetched['officer_name'] == 'Yaw Asante'

        assert auth_client.delete(f'/api/departments/{department_id}').status_code == 200
        assert auth_client.get(f'/api/departments/{department_id}').status_code == 404

    def test_validation_error(self, auth_client):
        response = auth_client.post('/api/departments', json={'name': 'L'})
        assert response.status_code == 400
        assert 'at least 2 characters' in response.get_json()['message']

    def test_update_missing(self, auth_client):
        response = auth_client.put('/api/departments/9', json={
            'name': 'Library', 'officer_name': 'Grace Owusu', 'officer_title': 'Librarian',
        })
        assert response.status_code == 404

    def test_items_and_cascade(self, auth_client):
        department_id = create_department(auth_client, 'Library')
        response = auth_client.post('/api/items', json={
            'department_id': department_id, 'name': 'Return borrowed books',
        })
        assert response.status_code == 201
        item_id = response.get_json()['data']['id']

        items = auth_client.get(f'/api/departments/{department_id}/items').get_json()['data']
        assert [i['id'] for i in items] == [item_id]
        filtered = auth_client.get(f'/api/items?department_id={department_id}').get_json()['data']
        assert len(filtered) == 1

        auth_client.delete(f'/api/departments/{department_id}')
        assert auth_client.get(f'/api/departments/{department_id}/items').get_json()['data'] == []

    def test_item_for_missing_department(self, auth_client):
        response = auth_client.post('/api/items', json={'department_id': 3, 'name': 'Return books'})
        assert response.status_code == 404


class TestStudentClearanceRoutes:

    def test_decision_flow(self, auth_client, student_id):
        library = create_department(auth_client, 'Library')
        finance = create_department(auth_client, 'Finance', 'Kofi Boateng', 'Bursar')
        decisions = f'/api/students/{student_id}/clearance/decisions'

        summary = auth_client.get(f'/api/students/{student_id}/clearance').get_json()
        assert summary['data']['fully_cleared'] is False
        assert summary['message'] == 'Waiting for 2 department(s): Library, Finance'

        for department_id in (library, finance):
            response = auth_client.post(decisions, json={'department_id': department_id, 'status': 'cleared'})
            assert response.status_code == 200

        summary = auth_client.get(f'/api/students/{student_id}/clearance').get_json()
        assert summary['data']['fully_cleared'] is True
        assert summary['message'] == 'All departments cleared'

        auth_client.post(decisions, json={
            'department_id': library, 'status': 'not_cleared', 'remarks': 'missing book',
        })
        status = auth_client.get(
            f'/api/students/{student_id}/clearance/departments/{library}'
        ).get_json()['data']
        assert status['status'] == 'not_cleared'
        assert status['record']['remarks'] == 'missing book'

        summary = auth_client.get(f'/api/students/{student_id}/clearance').get_json()
        assert summary['message'] == 'Not cleared by: Library'

    def test_pending_department_status(self, auth_client, student_id):
        library = create_department(auth_client, 'Library')
        status = auth_client.get(
            f'/api/students/{student_id}/clearance/departments/{library}'
        ).get_json()['data']
        assert status == {'status': 'pending', 'record': None}

    def test_invalid_decision(self, auth_client, student_id):
        library = create_department(auth_client, 'Library')
        response = auth_client.post(f'/api/students/{student_id}/clearance/decisions',
                                    json={'department_id': library, 'status': 'maybe'})
        assert response.status_code == 400

    def test_unknown_student(self, auth_client):
        assert auth_client.get('/api/students/404/clearance').status_code == 404

    def test_audit(self, auth_client, store, student_id):
        for year in ('2024', '2025'):
            store.insert('student_clearances', {
                'student_id': student_id, 'academic_year': year, 'department_clearances': [],
            })

        response = auth_client.get('/api/student-clearances/audit')
        assert response.status_code == 200
        assert response.get_json()['data'] == [{'student_id': student_id, 'records': 2}]

        strict = auth_client.get('/api/student-clearances/audit?strict=true')
        assert strict.status_code == 409

        listed = auth_client.get('/api/student-clearances').get_json()['data']
        assert len(listed) == 2


class TestMalformedInput:

    @pytest.mark.parametrize('body', [
        {'email': ADMIN['email'], 'password': 12345},
        {'email': ['admin@school.test'], 'password': ADMIN['password']},
        {'email': {'address': ADMIN['email']}, 'password': ADMIN['password']},
    ])
    def test_login_with_non_text_credentials(self, client, body):
        response = client.post('/api/auth/login', json=body)
        assert response.status_code == 400
        assert response.get_json()['ok'] is False

    def test_login_with_non_object_body(self, client):
        response = client.post('/api/auth/login', json=['admin@school.test', 'admin-password'])
        assert response.status_code == 400

    @pytest.mark.parametrize('method, url', [
        ('post', '/api/departments'),
        ('put', '/api/departments/1'),
        ('post', '/api/items'),
        ('put', '/api/items/1'),
        ('post', '/api/students/1/clearance/decisions'),
    ])
    @pytest.mark.parametrize('body', [['x'], 'cleared', 7])
    def test_non_object_json_body(self, auth_client, method, url, body):
        response = getattr(auth_client, method)(url, json=body)
        assert response.status_code == 400
        assert response.get_json()['message'] == 'Request body must be a JSON object'

    @pytest.mark.parametrize('department_id', ['²', '12x', '1.0', -1])
    def test_decision_with_malformed_department_id(self, auth_client, student_id, department_id):
        create_department(auth_client, 'Library')
        response = auth_client.post(f'/api/students/{student_id}/clearance/decisions',
                                    json={'department_id': department_id, 'status': 'cleared'})
        assert response.status_code == 400
        assert 'valid id' in response.get_json()['message']

    def test_item_with_malformed_department_id(self, auth_client):
        response = auth_client.post('/api/items', json={'department_id': '²', 'name': 'Return books'})
        assert response.status_code == 400

    def test_item_filter_with_malformed_department_id(self, auth_client):
        assert auth_client.get('/api/items?department_id=²').status_code == 400


class TestMiscRoutes:

    def test_summary_without_departments(self, auth_client, student_id):
        summary = auth_client.get(f'/api/students/{student_id}/clearance').get_json()
        assert summary['message'] == 'No clearance departments configured'
        assert summary['data']['fully_cleared'] is False

    def test_list_students(self, auth_client, student_id):
        response = auth_client.get('/api/students')
        assert response.status_code == 200
        students = response.get_json()['data']
        assert [s['id'] for s in students] == [student_id]
        assert students[0]['full_name'] == 'Ada Mensah'

    def test_students_require_login(self, client):
        assert client.get('/api/students').status_code == 401

    def test_delete_missing_item(self, auth_client):
        response = auth_client.delete('/api/items/41')
        assert response.status_code == 200
        assert response.get_json()['data'] == {'id': 41}

    def test_store_failure_is_service_unavailable(self, app, auth_client, monkeypatch):
        store = app.extensions['clearance_service'].store

        def failing_collect(kind, **filters):
            raise StoreError("Failed to read departments: database is locked")

        monkeypatch.setattr(store, 'collect', failing_collect)
        response = auth_client.get('/api/departments')
        assert response.status_code == 503
        body = response.get_json()
        assert body['ok'] is False
        assert 'database is locked' in body['message']
