"""
Customers API tests

Author: TM3
"""
BASE_URL = "/api/v1/customers"


def create_customer(client, **overrides):
    body = {
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@example.com",
        "phone": "+1-555-0102",
        "city": "Los Angeles",
        "country": "USA",
    }
    body.update(overrides)
    response = client.post(BASE_URL, json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCustomerCrud:
    """Test customer endpoints"""

    def test_create_returns_201(self, client, sample_customer_data):
        response = client.post(BASE_URL, json=sample_customer_data)

        assert response.status_code == 201
        customer = response.json()["data"]
        assert response.headers["location"] == f"{BASE_URL}/{customer['id']}"
        assert customer["fullName"] == "John Doe"
        assert customer["email"] == "john.doe@example.com"
        assert customer["isActive"] is True

    def test_duplicate_email_returns_409(self, client, sample_customer_data):
        client.post(BASE_URL, json=sample_customer_data)

        response = client.post(BASE_URL, json={**sample_customer_data, "firstName": "Johnny"})

        assert response.status_code == 409
        assert response.json() == {
            "statusCode": 409,
            "message": "Customer with Email 'john.doe@example.com' already exists.",
            "errors": [],
        }
        assert client.get(BASE_URL).json()["data"]["totalCount"] == 1

    def test_update_keeping_own_email(self, client):
        customer = create_customer(client)

        response = client.put(
            f"{BASE_URL}/{customer['id']}",
            json={"firstName": "Janet", "lastName": "Smith", "email": "jane.smith@example.com"},
        )

        assert response.status_code == 200
        updated = response.json()["data"]
        assert updated["fullName"] == "Janet Smith"
        assert updated["updatedAt"] is not None

    def test_update_to_taken_email_returns_409(self, client):
        create_customer(client, email="taken@example.com")
        other = create_customer(client, email="other@example.com")

        response = client.put(
            f"{BASE_URL}/{other['id']}",
            json={"firstName": "Jane", "lastName": "Smith", "email": "taken@example.com"},
        )

        assert response.status_code == 409

    def test_get_by_email(self, client):
        customer = create_customer(client)

        response = client.get(f"{BASE_URL}/email/jane.smith@example.com")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == customer["id"]

    def test_get_by_email_missing_returns_404(self, client):
        response = client.get(f"{BASE_URL}/email/nobody@example.com")

        assert response.status_code == 404
        assert "nobody@example.com" in response.json()["message"]

    def test_get_by_country(self, client):
        create_customer(client, email="a@example.com", country="UK")
        create_customer(client, email="b@example.com", country="USA")

        response = client.get(f"{BASE_URL}/country/UK")

        assert [c["email"] for c in response.json()["data"]] == ["a@example.com"]

    def test_delete(self, client):
        customer = create_customer(client)

        assert client.delete(f"{BASE_URL}/{customer['id']}").status_code == 200
        assert client.get(f"{BASE_URL}/{customer['id']}").status_code == 404


class TestCustomerValidation:
    def test_invalid_customer_returns_field_errors(self, client):
        response = client.post(BASE_URL, json={"firstName": "", "email": "not-an-email", "phone": "abc"})

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert errors["firstName"] == ["First name is required"]
        assert errors["lastName"] == ["Last name is required"]
        assert len(errors["email"]) == 1
        assert errors["phone"] == ["Phone number contains invalid characters"]


class TestCustomerListing:
    def test_search_matches_names_and_email(self, client):
        create_customer(client, firstName="Ann", lastName="Lee", email="ann@example.com")
        create_customer(client, firstName="Bob", lastName="Annison", email="bob@example.com")
        create_customer(client, firstName="Cy", lastName="Park", email="cy@annmail.com")
        create_customer(client, firstName="Dee", lastName="Ray", email="dee@example.com")

        response = client.get(BASE_URL, params={"searchTerm": "ANN"})

        page = response.json()["data"]
        assert page["totalCount"] == 3
        assert "Dee" not in [c["firstName"] for c in page["items"]]

    def test_sort_by_last_name_and_filter_country(self, client):
        create_customer(client, lastName="Young", email="y@example.com", country="USA")
        create_customer(client, lastName="Adams", email="a@example.com", country="USA")
        create_customer(client, lastName="Brown", email="b@example.com", country="UK")

        response = client.get(BASE_URL, params={"country": "USA", "sortBy": "lastName"})

        assert [c["lastName"] for c in response.json()["data"]["items"]] == ["Adams", "Young"]
