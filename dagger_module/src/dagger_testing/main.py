"""Dagger CI module for the hello API.

Runs the pytest suites in containers and exercises a live instance of the
service through Dagger service bindings.
"""

import asyncio

import dagger as dg
from dagger import dag, function, object_type

API_PORT = 4000


@object_type
class DaggerTesting:
    """Containerized test pipeline for the hello API using uv.

    Functions cover:
    - Unit tests in isolated containers
    - The same unit tests across several Python versions
    - A running API service for binding into other containers
    - Smoke and end-to-end tests against that live service
    """

    @function
    def test_container(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> dg.Container:
        """Create a base container with uv and source code.

        Args:
            source: Directory containing the source code
            python_version: Python version to use (default: 3.12)

        Returns:
            Container configured with uv and source code
        """
        uv_cache = dag.cache_volume("uv")

        return (
            dag.container()
            .from_(f"ghcr.io/astral-sh/uv:python{python_version}-bookworm-slim")
            .with_mounted_cache("/root/.cache/uv", uv_cache)
            .with_directory("/app", source)
            .with_workdir("/app")
            .with_env_variable("UV_SYSTEM_PYTHON", "1")
        )

    @function
    async def unit_test(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Run the unit suite with pytest.

        Args:
            source: Directory containing the source code
            python_version: Python version to use

        Returns:
            Test output from pytest
        """
        return await self.run_test(source, "tests/unit", python_version)

    @function
    async def unit_test_matrix(
        self, source: dg.Directory, versions: str = "3.10,3.11,3.12"
    ) -> str:
        """Run the unit suite concurrently on several Python versions.

        Args:
            source: Directory containing the source code
            versions: Comma-separated list of Python versions

        Returns:
            Formatted test results for all versions
        """
        version_list = [v.strip() for v in versions.split(",") if v.strip()]

        async def test_version(version: str) -> str:
            try:
                result = await self.unit_test(source, version)
            except dg.ExecError as e:
                return f"Python {version}: FAILED\n{e.stdout}\n{e.stderr}"
            return f"Python {version}: PASSED\n{result}"

        results = await asyncio.gather(*[test_version(v) for v in version_list])

        output_lines = ["=== MULTI-VERSION TEST RESULTS ===", ""]
        for result in results:
            output_lines.extend([result, "=" * 50, ""])

        return "\n".join(output_lines)

    @function
    async def run_test(
        self,
        source: dg.Directory,
        path: str,
        python_version: str = "3.12",
        markers: str = "not e2e",
    ) -> str:
        """Run tests at a specific path.

        Tests under tests/e2e need a bound service; use integration_test
        for those rather than passing markers="e2e" here.

        Args:
            source: Directory containing the source code
            path: Path to test files or directory
            python_version: Python version to use
            markers: pytest -m expression selecting the tests to run

        Returns:
            Test output from pytest
        """
        return await (
            self.test_container(source, python_version)
            .with_exec(["uv", "pip", "install", "-e", ".[test]"])
            .with_exec(["pytest", path, "-m", markers, "-v", "--tb=short"])
            .stdout()
        )

    @function
    def api_service(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> dg.Service:
        """Run the hello API as a Dagger service on port 4000.

        Args:
            source: Directory containing the application code
            python_version: Python version to use (default: 3.12)

        Returns:
            A Dagger service running ``python -m hello_api``
        """
        return (
            self.test_container(source, python_version)
            .with_exec(["uv", "pip", "install", "-e", "."])
            .with_env_variable("PORT", str(API_PORT))
            .with_env_variable("LOG_FORMAT", "text")
            .with_exposed_port(API_PORT)
            .as_service(args=["python", "-m", "hello_api"])
        )

    @function
    async def test_api_service(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Smoke-test the live service with curl.

        Binds the service under the hostname ``api`` and calls GET /,
        POST /health and GET /health from an alpine client container.

        Args:
            source: Directory containing the source code
            python_version: Python version to use

        Returns:
            The responses of all three routes
        """
        api_svc = self.api_service(source, python_version)
        base_url = f"http://api:{API_PORT}"

        test_client = (
            dag.container()
            .from_("alpine:latest")
            .with_exec(["apk", "add", "--no-cache", "curl", "jq"])
            .with_service_binding("api", api_svc)
        )

        root_response = await test_client.with_exec(
            ["curl", "-sf", f"{base_url}/"]
        ).stdout()

        ping_pretty = await test_client.with_exec(
            ["sh", "-c", f"curl -sf -X POST {base_url}/health | jq ."]
        ).stdout()

        health_pretty = await test_client.with_exec(
            ["sh", "-c", f"curl -sf {base_url}/health | jq ."]
        ).stdout()

        result_lines = [
            "=== API SERVICE TEST RESULTS ===",
            "",
            "Root Endpoint (GET /):",
            root_response,
            "",
            "Health Ping (POST /health):",
            ping_pretty,
            "",
            "Health Report (GET /health):",
            health_pretty,
            "",
            "All endpoints responded successfully!",
        ]

        return "\n".join(result_lines)

    @function
    async def integration_test(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Run the e2e suite against a live API service.

        Args:
            source: Directory containing the source code
            python_version: Python version to use

        Returns:
            Integration test results from pytest
        """
        api_svc = self.api_service(source, python_version)

        return await (
            self.test_container(source, python_version)
            .with_service_binding("api", api_svc)
            .with_env_variable("API_BASE_URL", f"http://api:{API_PORT}")
            .with_exec(["uv", "pip", "install", "-e", ".[test]"])
            .with_exec(["pytest", "tests/e2e", "-m", "e2e", "-v", "--tb=short"])
            .stdout()
        )
