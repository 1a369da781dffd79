import httpx
import pytest
import pytest_asyncio

from call2all import Call2AllClient


class Recorder:
    """Captures every request and answers with a canned JSON body"""

    def __init__(self):
        self.requests = []
        self.body = {"responseStatus": "OK"}

    def __call__(self, request):
        self.requests.append(request)
        return httpx.Response(200, json=self.body)

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def recorder():
    return Recorder()


@pytest_asyncio.fixture
async def client(recorder):
    client = Call2AllClient({"transport": httpx.MockTransport(recorder)})
    yield client
    await client.aclose()
