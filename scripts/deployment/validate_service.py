#!/usr/bin/env python3
"""
Validation script for URL Shortener service.
Exercises a running instance: health, create-or-fetch, redirect and error paths.
"""

import sys
import time
import requests
from typing import Optional
from datetime import datetime


class ServiceValidator:
    """Validates URL shortener service functionality."""

    def __init__(self, base_url: str = "http://localhost:9200"):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.test_results = []

    def print_header(self, text: str):
        """Print a formatted header."""
        print(f"\n{'='*60}")
        print(f"  {text}")
        print(f"{'='*60}\n")

    def print_test(self, name: str, passed: bool, details: str = ""):
        """Print test result."""
        status = "✅ PASS" if passed else "❌ FAIL"
        self.test_results.append((name, passed))
        print(f"{status} - {name}")
        if details:
            print(f"       {details}")

    def test_health_check(self) -> bool:
        """Test health check endpoint."""
        try:
            response = self.session.get(f"{self.base_url}/api/health", timeout=5)
            if response.status_code != 200:
                self.print_test("Health Check", False, f"Status: {response.status_code}")
                return False
            data = response.json()
            is_healthy = data.get("status") == "healthy" and data.get("database") == "healthy"
            self.print_test("Health Check", is_healthy, f"DB: {data.get('database')}, Cache: {data.get('cache')}")
            return is_healthy
        except requests.RequestException as e:
            self.print_test("Health Check", False, f"Error: {str(e)}")
            return False

    def test_create_short_url(self, test_url: str) -> Optional[str]:
        """Test creating a short URL through the JSON API."""
        try:
            response = self.session.post(
                f"{self.base_url}/api/shorten",
                json={"url": test_url},
                timeout=5,
            )
            if response.status_code == 200 and response.json().get("short_id"):
                data = response.json()
                self.print_test("Create Short URL", True, f"Id: {data['short_id']}, URL: {data.get('short_url')}")
                return data["short_id"]
            self.print_test("Create Short URL", False, f"Status: {response.status_code}")
            return None
        except requests.RequestException as e:
            self.print_test("Create Short URL", False, f"Error: {str(e)}")
            return None

    def test_repeat_returns_same_id(self, test_url: str, short_id: str) -> bool:
        """Test that shortening the same URL again returns the same id."""
        try:
            response = self.session.post(
                f"{self.base_url}/api/shorten",
                json={"url": test_url},
                timeout=5,
            )
            data = response.json() if response.status_code == 200 else {}
            same = data.get("short_id") == short_id and data.get("created") is False
            self.print_test("Idempotent Create", same, f"Got: {data.get('short_id')} (expected {short_id})")
            return same
        except requests.RequestException as e:
            self.print_test("Idempotent Create", False, f"Error: {str(e)}")
            return False

    def test_form_submission(self, test_url: str, short_id: str) -> bool:
        """Test the HTML form endpoint renders the same short id."""
        try:
            response = self.session.post(
                f"{self.base_url}/api/short",
                data={"url": test_url},
                timeout=5,
            )
            ok = response.status_code == 200 and f"/{short_id}" in response.text
            self.print_test("Form Submission", ok, f"Status: {response.status_code}")
            return ok
        except requests.RequestException as e:
            self.print_test("Form Submission", False, f"Error: {str(e)}")
            return False

    def test_redirect(self, short_id: str, expected_url: str) -> bool:
        """Test URL redirect functionality."""
        try:
            response = self.session.get(
                f"{self.base_url}/{short_id}",
                allow_redirects=False,
                timeout=5,
            )
            location = response.headers.get("Location", "")
            ok = response.status_code == 302 and location == expected_url
            self.print_test("URL Redirect", ok, f"Redirects to: {location[:50]}" if location else "No Location header")
            return ok
        except requests.RequestException as e:
            self.print_test("URL Redirect", False, f"Error: {str(e)}")
            return False

    def test_missing_url(self) -> bool:
        """Test form submission without a url field."""
        try:
            response = self.session.post(f"{self.base_url}/api/short", data={}, timeout=5)
            ok = response.status_code == 400 and response.text == "Invalid URL"
            self.print_test("Missing URL Rejection", ok, f"Status: {response.status_code} (expected 400)")
            return ok
        except requests.RequestException as e:
            self.print_test("Missing URL Rejection", False, f"Error: {str(e)}")
            return False

    def test_nonexistent_id(self) -> bool:
        """Test redirect for an unknown short id."""
        try:
            response = self.session.get(
                f"{self.base_url}/doesnotexist",
                allow_redirects=False,
                timeout=5,
            )
            ok = response.status_code == 404 and response.text == "URL not found"
            self.print_test("Non-existent Id", ok, f"Status: {response.status_code} (expected 404)")
            return ok
        except requests.RequestException as e:
            self.print_test("Non-existent Id", False, f"Error: {str(e)}")
            return False

    def test_web_interface(self) -> bool:
        """Test web interface homepage."""
        try:
            response = self.session.get(f"{self.base_url}/", timeout=5)
            ok = response.status_code == 200 and "text/html" in response.headers.get("content-type", "")
            self.print_test("Web Interface", ok, f"Content-Type: {response.headers.get('content-type', 'N/A')}")
            return ok
        except requests.RequestException as e:
            self.print_test("Web Interface", False, f"Error: {str(e)}")
            return False

    def run_all_tests(self) -> bool:
        """Run all validation tests."""
        self.print_header("URL Shortener Service Validation")
        print(f"Testing service at: {self.base_url}")
        print(f"Timestamp: {datetime.now().isoformat()}\n")

        if not self.test_health_check():
            print("\n❌ Health check failed. Service may not be running.")
            print(f"   Make sure the service is accessible at {self.base_url}")
            return False

        print()

        test_url = f"https://example.com/validate/{int(time.time())}"
        short_id = self.test_create_short_url(test_url)
        if short_id:
            self.test_repeat_returns_same_id(test_url, short_id)
            self.test_form_submission(test_url, short_id)
            self.test_redirect(short_id, test_url)

        print()

        self.test_missing_url()
        self.test_nonexistent_id()
        self.test_web_interface()

        self.print_summary()

        return all(passed for _, passed in self.test_results)

    def print_summary(self):
        """Print test summary."""
        total = len(self.test_results)
        passed = sum(1 for _, p in self.test_results if p)
        failed = total - passed

        self.print_header("Test Summary")
        print(f"Total Tests:  {total}")
        print(f"✅ Passed:     {passed}")
        print(f"❌ Failed:     {failed}")
        print(f"Success Rate: {(passed/total*100):.1f}%")

        if failed > 0:
            print("\n⚠️  Failed tests:")
            for name, passed in self.test_results:
                if not passed:
                    print(f"   - {name}")

        print()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Validate URL Shortener service functionality"
    )
    parser.add_argument(
        "--url",
        default="http://localhost:9200",
        help="Base URL of the service (default: http://localhost:9200)"
    )

    args = parser.parse_args()

    validator = ServiceValidator(args.url)

    try:
        success = validator.run_all_tests()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n\n⚠️  Validation interrupted by user")
        sys.exit(2)


if __name__ == "__main__":
    main()
