from __future__ import annotations

from datetime import date
from urllib.parse import urlparse

import pytest


BASE_URL = "http://backend.test"


class FakeResponse:
    def __init__(self, status_code: int, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no JSON body")
        return self._body


class FakeBackend:
    """In-memory stand-in for requests.Session talking to the REST backend."""

    def __init__(self):
        self.users = {"admin": "secret"}
        self.token = "tok-1"
        self.employees: list[dict] = []
        self.attendance: list[dict] = []
        self.failing_ids: set[int] = set()
        self.expired = False
        self.overrides: dict[str, FakeResponse] = {}
        self.calls: list[dict] = []
        self._next_id = 1

    def add_employee(self, full_name, department, email=None):
        emp = {
            "id": self._next_id,
            "full_name": full_name,
            "email": email or f"{full_name.lower()}@corp.test",
            "department": department,
        }
        self._next_id += 1
        self.employees.append(emp)
        return emp

    def add_record(self, employee_id, day, status):
        self.attendance.append({"employee_id": employee_id, "date": day.isoformat(), "status": status})

    def respond(self, path, status_code, body=None):
        self.overrides[path] = FakeResponse(status_code, body)

    # requests.Session surface
    def post(self, url, data=None, headers=None, timeout=None):
        path = urlparse(url).path
        self.calls.append({"method": "POST", "path": path, "headers": dict(headers or {}), "data": data})
        if path != "/auth/login":
            return FakeResponse(404, {"detail": "Not Found"})
        form = data or {}
        if form.get("username") not in self.users or self.users[form["username"]] != form.get("password"):
            return FakeResponse(401, {"detail": "Incorrect username or password"})
        return FakeResponse(200, {"access_token": self.token, "token_type": "bearer"})

    def request(self, method, url, headers=None, timeout=None, json=None, data=None):
        path = urlparse(url).path
        self.calls.append({"method": method, "path": path, "headers": dict(headers or {}), "json": json})

        if self.expired or (headers or {}).get("Authorization") != f"Bearer {self.token}":
            return FakeResponse(401, {"detail": "Could not validate credentials"})
        if path in self.overrides:
            return self.overrides[path]

        if method == "GET" and path == "/employees/":
            return FakeResponse(200, list(self.employees))
        if method == "POST" and path == "/employees/":
            if any(e["email"] == json["email"] for e in self.employees):
                return FakeResponse(400, {"detail": "Email already registered"})
            return FakeResponse(201, self.add_employee(json["full_name"], json["department"], json["email"]))
        if method == "DELETE" and path.startswith("/employees/"):
            emp_id = int(path.rsplit("/", 1)[1])
            before = len(self.employees)
            self.employees = [e for e in self.employees if e["id"] != emp_id]
            if len(self.employees) == before:
                return FakeResponse(404, {"detail": "Employee not found"})
            return FakeResponse(204)
        if method == "POST" and path == "/attendance/":
            if not any(e["id"] == json["employee_id"] for e in self.employees):
                return FakeResponse(404, {"detail": "Employee not found"})
            self.attendance.append(dict(json))
            return FakeResponse(201, dict(json, id=len(self.attendance)))
        if method == "GET" and path.startswith("/attendance/employee/"):
            emp_id = int(path.rsplit("/", 1)[1])
            if emp_id in self.failing_ids:
                return FakeResponse(500, {"detail": "Internal Server Error"})
            emp = next((e for e in self.employees if e["id"] == emp_id), None)
            if emp is None:
                return FakeResponse(404, {"detail": "Employee not found"})
            return FakeResponse(200, {
                "employee_name": emp["full_name"],
                "attendance": [a for a in self.attendance if a["employee_id"] == emp_id],
            })
        return FakeResponse(404, {"detail": "Not Found"})


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def today() -> date:
    return date(2026, 10, 19)
