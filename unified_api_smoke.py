#!/usr/bin/env python3
"""
Smoke test for a running admissions API.

Registers a throwaway student and admin against ``BASE_URL`` (override
with ``ADMISSIONS_BASE_URL``), walks through every route with the
expected status codes and prints a summary.  Exits non-zero when any
call did not answer as expected.
"""
import json
import os
import sys
import time
import uuid
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

import requests

BASE_URL = os.getenv("ADMISSIONS_BASE_URL", "http://127.0.0.1:3000").rstrip("/")


@dataclass
class CallResult:
    success: bool
    endpoint: str
    method: str
    status_code: int
    response_time: float
    error_message: str = ""
    description: str = ""
    role: str = ""


class AdmissionsSmokeRunner:
    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.session = requests.Session()
        self.results: list[CallResult] = []
        self.errors: list[CallResult] = []
        tag = uuid.uuid4().hex[:8]
        self.student_email = f"smoke-{tag}@example.com"
        self.admin_email = f"smoke-admin-{tag}@example.com"

    def call(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None,
             expected_status: int = 200, description: str = "", token: Optional[str] = None,
             role: str = "") -> Optional[requests.Response]:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        start = time.time()
        try:
            response = self.session.request(method, f"{self.base_url}{endpoint}", json=data, headers=headers, timeout=10)
        except requests.RequestException as e:
            result = CallResult(False, endpoint, method, 0, time.time() - start, str(e), description, role)
            print(f"❌ {method} {endpoint} - {e}")
            self.results.append(result)
            self.errors.append(result)
            return None

        elapsed = time.time() - start
        ok = response.status_code == expected_status
        result = CallResult(
            success=ok,
            endpoint=endpoint,
            method=method,
            status_code=response.status_code,
            response_time=elapsed,
            error_message="" if ok else response.text[:200],
            description=description,
            role=role,
        )
        self.results.append(result)
        if ok:
            print(f"✅ {method} {endpoint} - {response.status_code} ({elapsed:.2f}s) {description}")
        else:
            print(f"❌ {method} {endpoint} - expected {expected_status}, got {response.status_code} ({elapsed:.2f}s)")
            self.errors.append(result)
        return response

    def run_student_flow(self) -> None:
        print("\n🎓 student flow")
        body = {
            "fullName": "Smoke Student",
            "email": self.student_email,
            "password": "smoke-pass-1",
            "phoneNumber": "0700000000",
            "parentContact": "Parent 0700000001",
            "dob": "2007-01-01",
            "highSchool": "Smoke High",
        }
        self.call("GET", "/healthz", description="health check")
        self.call("POST", "/register", body, 201, "register", role="student")
        self.call("POST", "/register", body, 500, "duplicate register", role="student")
        self.call("POST", "/login", {"email": self.student_email, "password": "nope"}, 401, "wrong password", role="student")
        resp = self.call("POST", "/login", {"email": self.student_email, "password": "smoke-pass-1"}, 200, "login", role="student")
        token = resp.json().get("accessToken") if resp is not None and resp.ok else None
        if not token:
            return
        self.call("POST", "/add_coding_score", {"score": 87.5}, 201, "coding score", token, "student")
        self.call("POST", "/add_project", {"projectName": "Smoke", "description": "d"}, 201, "add project", token, "student")
        self.call("POST", "/assign_project", {"projectName": "Assigned"}, 201, "assign project", token, "student")
        self.call("POST", "/report_income", {"income": 100}, 200, "report income", token, "student")
        self.call("GET", "/coding_scores", None, 200, "list scores", token, "student")
        self.call("GET", "/projects", None, 200, "list projects", token, "student")
        self.call("GET", "/statistics", None, 403, "student cannot read statistics", token, "student")
        self.call("POST", "/report_income", {"income": 1}, 401, "no token", role="anonymous")

    def run_admin_flow(self) -> None:
        print("\n🛡  admin flow")
        creds = {"email": self.admin_email, "password": "smoke-admin-1"}
        self.call("POST", "/admin", {"email": self.admin_email}, 400, "missing password", role="admin")
        self.call("POST", "/admin", creds, 201, "admin register", role="admin")
        resp = self.call("POST", "/admin", creds, 200, "admin login", role="admin")
        self.call("POST", "/admin", {**creds, "password": "wrong"}, 401, "admin wrong password", role="admin")
        token = resp.json().get("accessToken") if resp is not None and resp.ok else None
        if token:
            self.call("GET", "/statistics", None, 200, "statistics", token, "admin")
            self.call("POST", "/add_project", {"projectName": "x"}, 403, "admin cannot add projects", token, "admin")
        self.call("GET", "/statistics", None, 401, "statistics without token", role="anonymous")

    def run(self) -> bool:
        print(f"Admissions API smoke test against {self.base_url}")
        print("=" * 50)
        self.run_student_flow()
        self.run_admin_flow()
        self.report()
        return not self.errors

    def report(self) -> None:
        total = len(self.results)
        passed = sum(1 for r in self.results if r.success)
        rate = (passed / total) * 100 if total else 0
        print("\n🎯 summary")
        print(f"  calls:   {total}")
        print(f"  passed:  {passed}")
        print(f"  failed:  {len(self.errors)}")
        print(f"  rate:    {rate:.1f}%")
        if self.errors:
            print("=" * 80)
            for i, error in enumerate(self.errors, 1):
                print(f"{i}. [{error.role}] {error.method} {error.endpoint} -> {error.status_code}")
                print(f"   {error.description}: {error.error_message}")
        report_path = os.getenv("SMOKE_REPORT")
        if report_path:
            with open(report_path, "w", encoding="utf-8") as f:
                json.dump({
                    "timestamp": datetime.now().isoformat(),
                    "base_url": self.base_url,
                    "results": [asdict(r) for r in self.results],
                }, f, indent=2)
            print(f"\n📝 report written to {report_path}")


def main() -> None:
    runner = AdmissionsSmokeRunner()
    sys.exit(0 if runner.run() else 1)


if __name__ == "__main__":
    main()
