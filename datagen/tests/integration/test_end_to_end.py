"""
End-to-end flow: mapping source to generated documents, bulk bodies and exports.
"""

import json

import pandas as pd

from schema_datagen.config.models import GeneratorConfig
from schema_datagen.generators.document_generator import DocumentGenerator
from schema_datagen.mapping.utils import normalize_mapping
from schema_datagen.services import ExportService, run_bulk
from schema_datagen.streaming import LiveFeed

GET_MAPPING_RESPONSE = {
    "orders-2024.03": {
        "mappings": {
            "properties": {
                "order_id": {"type": "keyword"},
                "status": {"type": "keyword"},
                "total_amount": {"type": "float"},
                "placed_at": {"type": "date", "format": "epoch_millis"},
                "customer": {
                    "properties": {
                        "first_name": {"type": "keyword"},
                        "email": {"type": "keyword"},
                    }
                },
            }
        }
    }
}

RULES = {"status": {"kind": "string_list", "values": ["new", "paid", "shipped"]}}


def test_generate_bulk_and_export(tmp_path, day_range):
    """Should carry one batch through the bulk boundary and file export."""
    mapping = normalize_mapping(GET_MAPPING_RESPONSE, strict=True)
    config = GeneratorConfig(seed=21, chunk_size=7)
    generator = DocumentGenerator(config)

    documents = generator.generate_many(mapping, 30, day_range, RULES)

    received = []

    def send(body, chunk):
        lines = body.splitlines()
        received.extend(json.loads(line) for line in lines[1::2])
        assert all(json.loads(a) == {"index": {"_index": "orders"}} for a in lines[0::2])
        return None

    progress = run_bulk("orders", documents, send, config=config)

    assert received == documents
    assert progress.processed == 30
    assert progress.chunk_count == 5

    service = ExportService(base_dir=tmp_path)
    csv_path = service.export_documents(documents, format="csv", name="orders")
    frame = pd.read_csv(csv_path)
    assert len(frame) == 30
    assert set(frame["status"]) <= {"new", "paid", "shipped"}
    assert json.loads(frame.loc[0, "customer"]).keys() == {"first_name", "email"}

    partitions = service.export_documents(
        documents, format="ndjson", name="orders", partition_by="status"
    )
    assert sum(len(p.read_text().splitlines()) for p in partitions) == 30


def test_live_feed_ticks_into_bulk():
    """Should stream ticks of fresh documents through the bulk boundary."""
    mapping = normalize_mapping(GET_MAPPING_RESPONSE)
    feed = LiveFeed(
        mapping,
        rules=RULES,
        config=GeneratorConfig(seed=3, realtime={"docs_per_tick": 2}),
    )

    batches = [feed.tick() for _ in range(3)]
    documents = [doc for batch in batches for doc in batch]

    progress = run_bulk("orders-live", documents, lambda body, chunk: None, chunk_size=4)

    assert feed.ticks == 3
    assert progress.succeeded == 6
    assert all(batch[0]["placed_at"] == batch[1]["placed_at"] for batch in batches)
