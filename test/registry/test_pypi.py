import pytest
import requests

from version_checker import _registry as registry


def get_mock_session(func):
    class MockSession:
        def __init__(self, create_response):
            self.create_response = create_response
            self.urls = []

        def get(self, url, **kwargs):
            self.urls.append(url)
            return self.create_response()

    return MockSession(func)


@pytest.mark.online
def test_pypi():
    versions = registry.PyPIRegistry(timeout=15).versions("requests")
    assert "2.0.0" in versions


def test_pypi_mocked_response():
    def get_mock_response():
        class MockResponse:
            def raise_for_status(self):
                pass

            def json(self):
                return {"info": {}, "releases": {"0.1.0": [], "0.2.0": [], "0.3.0rc1": []}}

        return MockResponse()

    pypi = registry.PyPIRegistry()
    session = get_mock_session(get_mock_response)
    pypi.session = session

    assert pypi.versions("Version_Checker") == ["0.1.0", "0.2.0", "0.3.0rc1"]
    # Names are canonicalized before being put into the URL.
    assert session.urls == ["https://pypi.org/pypi/version-checker/json"]


@pytest.mark.parametrize(
    "status_code, exc", [(404, registry.PackageNotFound), (500, registry.RegistryError)]
)
def test_pypi_http_error(status_code, exc):
    def get_error_response():
        class MockResponse:
            def raise_for_status(self):
                raise requests.HTTPError

        response = MockResponse()
        response.status_code = status_code
        return response

    pypi = registry.PyPIRegistry()
    pypi.session = get_mock_session(get_error_response)

    with pytest.raises(exc):
        pypi.versions("version-checker")


def test_pypi_no_releases_key():
    def get_mock_response():
        class MockResponse:
            def raise_for_status(self):
                pass

            def json(self):
                return {"info": {}}

        return MockResponse()

    pypi = registry.PyPIRegistry()
    pypi.session = get_mock_session(get_mock_response)

    with pytest.raises(registry.RegistryError, match="malformed"):
        pypi.versions("version-checker")


def test_pypi_connection_error():
    class RaisingSession:
        def get(self, url, **kwargs):
            raise requests.ConnectTimeout

    pypi = registry.PyPIRegistry()
    pypi.session = RaisingSession()

    with pytest.raises(registry.ConnectionError):
        pypi.versions("version-checker")


def test_pypi_interrupted_transfer():
    class RaisingSession:
        def get(self, url, **kwargs):
            raise requests.exceptions.ChunkedEncodingError("connection broken")

    pypi = registry.PyPIRegistry()
    pypi.session = RaisingSession()

    with pytest.raises(registry.ConnectionError):
        pypi.versions("version-checker")


@pytest.mark.parametrize("payload", [[], "releases", {"releases": ["0.1.0"]}])
def test_pypi_unexpected_payload(payload):
    def get_mock_response():
        class MockResponse:
            def raise_for_status(self):
                pass

            def json(self):
                return payload

        return MockResponse()

    pypi = registry.PyPIRegistry()
    pypi.session = get_mock_session(get_mock_response)

    with pytest.raises(registry.RegistryError, match="malformed"):
        pypi.versions("version-checker")
