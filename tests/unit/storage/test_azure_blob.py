import httpx
import pytest
import respx

from labelkit.errors import (
    ErrorCode,
    ResourceNotFoundError,
    StorageAuthError,
    StorageConfigError,
    StorageIOError,
)
from labelkit.storage import AzureBlobStorage

SAS_URL = "https://acct.blob.core.windows.net/projects?sv=2020-08-04&sig=abc"


@pytest.fixture
def storage():
    return AzureBlobStorage(sas_url=SAS_URL)


class TestBlobUrl:
    def test_container_name(self, storage):
        assert storage.container_name == "projects"

    def test_blob_url_keeps_sas_query(self, storage):
        url = storage.blob_url("Invoice.json")

        assert url.host == "acct.blob.core.windows.net"
        assert url.path == "/projects/Invoice.json"
        assert url.params["sig"] == "abc"
        assert url.params["sv"] == "2020-08-04"

    def test_blob_url_escapes_reserved_characters(self, storage):
        url = storage.blob_url("Invoice #1?.json")

        assert url.raw_path.startswith(b"/projects/Invoice%20%231%3F.json?")
        assert url.params["sig"] == "abc"

    def test_relative_sas_url_rejected(self):
        with pytest.raises(StorageConfigError):
            AzureBlobStorage(sas_url="/projects?sig=abc")


class TestReadText:
    @pytest.mark.asyncio
    async def test_read_text_success(self, storage):
        async with respx.mock(base_url="https://acct.blob.core.windows.net") as respx_mock:
            route = respx_mock.get("/projects/Invoice.json").mock(
                return_value=httpx.Response(httpx.codes.OK, text='{"name": "Invoice"}')
            )

            text = await storage.read_text("Invoice.json")

        assert text == '{"name": "Invoice"}'
        assert route.called
        assert route.calls.last.request.url.params["sig"] == "abc"

    @pytest.mark.asyncio
    async def test_404_is_not_found(self, storage):
        async with respx.mock(base_url="https://acct.blob.core.windows.net") as respx_mock:
            respx_mock.get("/projects/Invoice.json").mock(
                return_value=httpx.Response(httpx.codes.NOT_FOUND)
            )

            with pytest.raises(ResourceNotFoundError) as exc_info:
                await storage.read_text("Invoice.json")

        assert exc_info.value.error_code is ErrorCode.RESOURCE_NOT_FOUND
        assert exc_info.value.path == "Invoice.json"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN])
    async def test_auth_failures(self, storage, status):
        async with respx.mock(base_url="https://acct.blob.core.windows.net") as respx_mock:
            respx_mock.get("/projects/Invoice.json").mock(return_value=httpx.Response(status))

            with pytest.raises(StorageAuthError) as exc_info:
                await storage.read_text("Invoice.json")

        assert exc_info.value.error_code is ErrorCode.STORAGE_AUTH_FAILED

    @pytest.mark.asyncio
    async def test_server_error_is_io_error(self, storage):
        async with respx.mock(base_url="https://acct.blob.core.windows.net") as respx_mock:
            respx_mock.get("/projects/Invoice.json").mock(
                return_value=httpx.Response(httpx.codes.SERVICE_UNAVAILABLE)
            )

            with pytest.raises(StorageIOError) as exc_info:
                await storage.read_text("Invoice.json")

        assert exc_info.value.error_code is ErrorCode.STORAGE_IO_ERROR

    @pytest.mark.asyncio
    async def test_transport_error_is_io_error(self, storage):
        async with respx.mock(base_url="https://acct.blob.core.windows.net") as respx_mock:
            respx_mock.get("/projects/Invoice.json").mock(
                side_effect=httpx.ConnectError("connection refused")
            )

            with pytest.raises(StorageIOError) as exc_info:
                await storage.read_text("Invoice.json")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["Invoice #1.json", "Q?.json"])
    async def test_reserved_characters_still_map_404(self, storage, path):
        async with respx.mock(base_url="https://acct.blob.core.windows.net") as respx_mock:
            route = respx_mock.get().mock(return_value=httpx.Response(httpx.codes.NOT_FOUND))

            with pytest.raises(ResourceNotFoundError) as exc_info:
                await storage.read_text(path)

        assert exc_info.value.path == path
        assert route.calls.last.request.url.params["sig"] == "abc"
