"""Shared fixtures: settings pointed at tmp files and a stub index service."""
import json
from pathlib import Path

import httpx
import pytest

from games_index.index_client import IndexClient
from games_index.settings import Settings

HEADER = (
    "Name,Platform,Year_of_Release,Genre,Publisher,NA_Sales,EU_Sales,JP_Sales,"
    "Other_Sales,Global_Sales,Critic_Score,Critic_Count,User_Score,User_Count,Rating"
)


def write_csv(path: Path, rows) -> Path:
    path.write_text("\n".join([HEADER, *rows]) + "\n", encoding="utf-8")
    return path


def search_payload(total, hits):
    return {
        "took": 3,
        "hits": {
            "total": total,
            "hits": [{"_id": str(i), "_source": src} for i, src in enumerate(hits)],
        },
    }


class StubIndex:
    """Records requests and answers them from canned handlers."""

    def __init__(self):
        self.requests = []
        self.documents = {}
        self.search_handler = lambda body: search_payload(0, [])

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "PUT":
            doc_id = request.url.path.rsplit("/", 1)[-1]
            self.documents[doc_id] = json.loads(request.content)
            return httpx.Response(201, json={"result": "created", "_id": doc_id})
        if request.method == "POST" and request.url.path.endswith("/_search"):
            return httpx.Response(200, json=self.search_handler(json.loads(request.content)))
        return httpx.Response(404, json={"error": "not found"})


@pytest.fixture
def stub_index():
    return StubIndex()


@pytest.fixture
def client(stub_index):
    with IndexClient("http://es.test:9200", transport=httpx.MockTransport(stub_index)) as c:
        yield c


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATASET_DIR=tmp_path,
        GAMES_CSV=tmp_path / "games.csv",
        OUTPUT_CSV=tmp_path / "out" / "predecessors.csv",
        ES_BASE_URL="http://es.test:9200",
    )
