"""Tests for the nested employees endpoints."""

from uuid import UUID, uuid4

from fastapi.testclient import TestClient

from integration.repositories import InMemoryDataStore
from tests.fixtures.factories import CompanyFactory, seed


class TestEmployeesApi:
    def test_list_employees_for_company(self, client: TestClient, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create(employee_count=2)
        seed(store, company)

        response = client.get(f"/api/companies/{company.id}/employees")

        assert response.status_code == 200
        assert [e["name"] for e in response.json()] == ["Employee 1", "Employee 2"]

    def test_list_employees_for_unknown_company_returns_404(self, client: TestClient) -> None:
        response = client.get(f"/api/companies/{uuid4()}/employees")

        assert response.status_code == 404

    def test_create_employee_then_follow_location(self, client: TestClient, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create()
        seed(store, company)

        response = client.post(f"/api/companies/{company.id}/employees", json={"name": "Kane", "age": 35, "position": "Administrator"})

        assert response.status_code == 201
        body = response.json()
        employee_id = UUID(body["id"])
        assert response.headers["location"] == f"/api/companies/{company.id}/employees/{employee_id}"

        fetched = client.get(response.headers["location"])
        assert fetched.status_code == 200
        assert fetched.json() == body

    def test_create_employee_for_unknown_company_returns_404(self, client: TestClient) -> None:
        response = client.post(f"/api/companies/{uuid4()}/employees", json={"name": "Kane", "age": 35, "position": "Administrator"})

        assert response.status_code == 404

    def test_create_underage_employee_returns_400(self, client: TestClient, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create()
        seed(store, company)

        response = client.post(f"/api/companies/{company.id}/employees", json={"name": "Kid", "age": 12, "position": "Intern"})

        assert response.status_code == 400
        assert store.companies[company.id].employees == []

    def test_create_employee_without_body_returns_400(self, client: TestClient, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create()
        seed(store, company)

        response = client.post(f"/api/companies/{company.id}/employees")

        assert response.status_code == 400
        assert response.json()["detail"] == "EmployeeForCreationDto object is null"

    def test_get_employee_of_another_company_returns_404(self, client: TestClient, store: InMemoryDataStore) -> None:
        owner = CompanyFactory.create(employee_count=1)
        other = CompanyFactory.create(name="Other")
        seed(store, owner, other)

        response = client.get(f"/api/companies/{other.id}/employees/{owner.employees[0].id}")

        assert response.status_code == 404

    def test_update_employee_persists(self, client: TestClient, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create(employee_count=1)
        seed(store, company)
        employee_id = company.employees[0].id

        response = client.put(f"/api/companies/{company.id}/employees/{employee_id}", json={"name": "Employee 1", "age": 40, "position": "Lead developer"})

        assert response.status_code == 204
        fetched = client.get(f"/api/companies/{company.id}/employees/{employee_id}").json()
        assert (fetched["age"], fetched["position"]) == (40, "Lead developer")

    def test_update_unknown_employee_returns_404(self, client: TestClient, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create()
        seed(store, company)

        response = client.put(f"/api/companies/{company.id}/employees/{uuid4()}", json={"name": "Nobody", "age": 40, "position": "Ghost"})

        assert response.status_code == 404

    def test_delete_employee(self, client: TestClient, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create(employee_count=2)
        seed(store, company)
        removed_id = company.employees[0].id

        response = client.delete(f"/api/companies/{company.id}/employees/{removed_id}")

        assert response.status_code == 204
        assert client.get(f"/api/companies/{company.id}/employees/{removed_id}").status_code == 404
        assert len(client.get(f"/api/companies/{company.id}/employees").json()) == 1

    def test_delete_unknown_employee_returns_404(self, client: TestClient, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create()
        seed(store, company)

        response = client.delete(f"/api/companies/{company.id}/employees/{uuid4()}")

        assert response.status_code == 404

    def test_non_guid_ids_match_no_route(self, client: TestClient, store: InMemoryDataStore) -> None:
        company = CompanyFactory.create()
        seed(store, company)

        assert client.get("/api/companies/not-a-guid/employees").status_code == 404
        assert client.get(f"/api/companies/{company.id}/employees/not-a-guid").status_code == 404
