"""GraphQL mutations - auth flow, gated CRUD, enrollments, error extensions.

Invariants checked:
    - Mutations without a valid Bearer token fail with extensions.code UNAUTHORIZED
    - Domain failures surface their code (VALIDATION_ERROR, CONFLICT, NOT_FOUND)
    - A failed mutation leaves the store unchanged
"""

REGISTER = """
mutation Register($email: String!, $password: String!) {
  registerUser(email: $email, password: $password) { token user { id email } }
}
"""

LOGIN = """
mutation Login($email: String!, $password: String!) {
  login(email: $email, password: $password) { token user { email } }
}
"""

CREATE_LEARNER = """
mutation Create($data: CreateLearnerInput!) {
  createLearner(data: $data) { id name email age fieldOfStudy subjectCount }
}
"""

UPDATE_LEARNER = """
mutation Update($id: ID!, $data: UpdateLearnerInput!) {
  updateLearner(id: $id, data: $data) { id name age fieldOfStudy }
}
"""

CREATE_SUBJECT = """
mutation Create($data: CreateSubjectInput!) {
  createSubject(data: $data) { id code creditHours }
}
"""

ENROLL = """
mutation Enroll($learnerId: ID!, $subjectId: ID!) {
  enrollLearner(learnerId: $learnerId, subjectId: $subjectId) {
    id subjectCount subjects { code }
  }
}
"""

UNENROLL = """
mutation Unenroll($learnerId: ID!, $subjectId: ID!) {
  unenrollLearner(learnerId: $learnerId, subjectId: $subjectId) { id subjectCount }
}
"""

NEW_LEARNER = {"name": "Ada Lovelace", "email": "ada@x.com", "age": 28}


def _code(body):
    return body["errors"][0]["extensions"]["code"]


# --- auth ---------------------------------------------------------------------

async def test_register_then_login(gql):
    creds = {"email": "ops@campus.edu", "password": "password123"}
    registered = await gql(REGISTER, creds)
    assert registered["data"]["registerUser"]["user"]["email"] == "ops@campus.edu"

    logged_in = await gql(LOGIN, creds)
    assert logged_in["data"]["login"]["token"]


async def test_register_short_password(gql):
    body = await gql(REGISTER, {"email": "ops@campus.edu", "password": "short"})
    assert _code(body) == "VALIDATION_ERROR"
    assert body["errors"][0]["extensions"]["field"] == "password"


async def test_login_failure_is_generic(gql, auth_headers):
    wrong = await gql(LOGIN, {"email": "admin@campus.edu", "password": "wrong-pass"})
    unknown = await gql(LOGIN, {"email": "nobody@campus.edu", "password": "wrong-pass"})
    assert _code(wrong) == _code(unknown) == "AUTHENTICATION_FAILED"
    assert wrong["errors"][0]["message"] == unknown["errors"][0]["message"]


async def test_duplicate_registration_conflicts(gql, auth_headers):
    body = await gql(REGISTER, {"email": "ADMIN@campus.edu", "password": "password123"})
    assert _code(body) == "CONFLICT"


# --- gating -------------------------------------------------------------------

async def test_create_without_token_rejected(gql, registrar):
    body = await gql(CREATE_LEARNER, {"data": NEW_LEARNER})
    assert _code(body) == "UNAUTHORIZED"
    assert registrar.counts()["learners"] == 4


async def test_anonymous_malformed_create_is_unauthorized(gql, registrar):
    body = await gql(CREATE_LEARNER, {"data": {"name": "X", "email": "a", "age": 20}})
    assert _code(body) == "UNAUTHORIZED"
    assert registrar.counts()["learners"] == 4


async def test_anonymous_malformed_update_is_unauthorized(gql, registrar):
    body = await gql(
        UPDATE_LEARNER, {"id": "1", "data": {"name": "   ", "age": 3}},
    )
    assert _code(body) == "UNAUTHORIZED"
    assert registrar.get_learner("1").name == "Salma Youssef"


async def test_anonymous_malformed_subject_is_unauthorized(gql):
    data = {"name": " ", "code": " ", "creditHours": 9, "educator": " "}
    body = await gql(CREATE_SUBJECT, {"data": data})
    assert _code(body) == "UNAUTHORIZED"


async def test_bad_token_treated_as_anonymous(gql):
    body = await gql(
        CREATE_LEARNER, {"data": NEW_LEARNER},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert _code(body) == "UNAUTHORIZED"


async def test_delete_without_token_rejected(gql, registrar):
    body = await gql('mutation { deleteSubject(id: "1") }')
    assert _code(body) == "UNAUTHORIZED"
    assert registrar.get_subject("1") is not None


# --- learners -----------------------------------------------------------------

async def test_create_learner(gql, auth_headers):
    body = await gql(CREATE_LEARNER, {"data": NEW_LEARNER}, headers=auth_headers)
    created = body["data"]["createLearner"]
    assert created == {
        "id": "5",
        "name": "Ada Lovelace",
        "email": "ada@x.com",
        "age": 28,
        "fieldOfStudy": "Undeclared",
        "subjectCount": 0,
    }


async def test_create_underage_learner(gql, auth_headers, registrar):
    data = {**NEW_LEARNER, "age": 17}
    body = await gql(CREATE_LEARNER, {"data": data}, headers=auth_headers)
    assert _code(body) == "VALIDATION_ERROR"
    assert body["errors"][0]["extensions"]["field"] == "age"
    assert registrar.counts()["learners"] == 4


async def test_create_duplicate_email(gql, auth_headers):
    data = {**NEW_LEARNER, "email": "SALMA.Y@example.com"}
    body = await gql(CREATE_LEARNER, {"data": data}, headers=auth_headers)
    assert _code(body) == "CONFLICT"


async def test_partial_update(gql, auth_headers):
    body = await gql(UPDATE_LEARNER, {"id": "2", "data": {"age": 30}}, headers=auth_headers)
    assert body["data"]["updateLearner"] == {
        "id": "2", "name": "Karim Adel", "age": 30, "fieldOfStudy": "Cybersecurity",
    }


async def test_update_null_field_of_study_resets(gql, auth_headers):
    body = await gql(
        UPDATE_LEARNER, {"id": "2", "data": {"fieldOfStudy": None}}, headers=auth_headers,
    )
    assert body["data"]["updateLearner"]["fieldOfStudy"] == "Undeclared"


async def test_update_null_name_rejected(gql, auth_headers):
    body = await gql(
        UPDATE_LEARNER, {"id": "2", "data": {"name": None}}, headers=auth_headers,
    )
    assert _code(body) == "VALIDATION_ERROR"


async def test_update_unknown_learner(gql, auth_headers):
    body = await gql(UPDATE_LEARNER, {"id": "99", "data": {"age": 30}}, headers=auth_headers)
    assert _code(body) == "NOT_FOUND"
    assert body["errors"][0]["extensions"]["entityId"] == "99"


async def test_delete_learner_cascades(gql, auth_headers):
    body = await gql('mutation { deleteLearner(id: "1") }', headers=auth_headers)
    assert body["data"]["deleteLearner"] is True

    subject = await gql('{ subject(id: "1") { learners { id } learnerCount } }')
    assert subject["data"]["subject"] == {"learners": [{"id": "3"}], "learnerCount": 1}


async def test_delete_unknown_is_false(gql, auth_headers):
    body = await gql('mutation { deleteLearner(id: "99") }', headers=auth_headers)
    assert body["data"]["deleteLearner"] is False


# --- subjects -----------------------------------------------------------------

async def test_create_subject(gql, auth_headers):
    data = {"name": "Databases", "code": "DB220", "creditHours": 5, "educator": "Prof. Sara"}
    body = await gql(CREATE_SUBJECT, {"data": data}, headers=auth_headers)
    assert body["data"]["createSubject"] == {"id": "5", "code": "DB220", "creditHours": 5}


async def test_create_subject_bad_credit_hours(gql, auth_headers):
    data = {"name": "Databases", "code": "DB220", "creditHours": 6, "educator": "Prof. Sara"}
    body = await gql(CREATE_SUBJECT, {"data": data}, headers=auth_headers)
    assert _code(body) == "VALIDATION_ERROR"


async def test_create_subject_duplicate_code(gql, auth_headers):
    data = {"name": "Web", "code": "wd101", "creditHours": 3, "educator": "Prof. Sara"}
    body = await gql(CREATE_SUBJECT, {"data": data}, headers=auth_headers)
    assert _code(body) == "CONFLICT"


async def test_delete_subject_cascades(gql, auth_headers):
    body = await gql('mutation { deleteSubject(id: "2") }', headers=auth_headers)
    assert body["data"]["deleteSubject"] is True

    learner = await gql('{ learner(id: "3") { subjects { code } } }')
    assert learner["data"]["learner"]["subjects"] == [{"code": "WD101"}]


# --- enrollments --------------------------------------------------------------

async def test_enroll_is_idempotent(gql, auth_headers):
    variables = {"learnerId": "2", "subjectId": "1"}
    await gql(ENROLL, variables, headers=auth_headers)
    body = await gql(ENROLL, variables, headers=auth_headers)
    learner = body["data"]["enrollLearner"]
    assert learner["subjectCount"] == 2
    assert [s["code"] for s in learner["subjects"]] == ["WD101", "CS405"]


async def test_unenroll(gql, auth_headers):
    body = await gql(UNENROLL, {"learnerId": "1", "subjectId": "1"}, headers=auth_headers)
    assert body["data"]["unenrollLearner"] == {"id": "1", "subjectCount": 1}


async def test_enroll_unknown_subject(gql, auth_headers):
    body = await gql(ENROLL, {"learnerId": "1", "subjectId": "99"}, headers=auth_headers)
    assert _code(body) == "NOT_FOUND"
    assert body["errors"][0]["extensions"]["entityKind"] == "Subject"
