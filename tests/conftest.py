import random
from datetime import datetime, timedelta

import pytest

from collection import CollectionController
from export import Column
from identity import RandomNumberPolicy
from schema import EntitySchema, FormField


class FakeClock:
    def __init__(self, start=datetime(2026, 10, 18, 9, 30)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


class ScriptedRng:
    """Stands in for random.Random; replays fixed numbers."""

    def __init__(self, numbers):
        self.numbers = list(numbers)

    def randint(self, low, high):
        return self.numbers.pop(0) if len(self.numbers) > 1 else self.numbers[0]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


def make_schema(rng=None, page_size=5, seed=None):
    return EntitySchema(
        name="assets", title="Assets", singular="Asset",
        identity_field="id",
        identity_policy=RandomNumberPolicy("AST", rng=rng or random.Random(99)),
        searchable_fields=("name", "id"),
        filters={"department": "All Departments", "status": "All"},
        fields=[
            FormField("id", "Asset ID"),
            FormField("name", "Name", required=True),
            FormField("department", "Department"),
            FormField("status", "Status", choices=["Active", "Retired"]),
        ],
        columns=[
            Column("Asset ID", "id"),
            Column("Name", "name"),
            Column("Department", "department", default="N/A"),
        ],
        page_size=page_size,
        seed=seed or [],
    )


def make_records(count, department=lambda i: "Engineering" if i % 2 else "Marketing"):
    return [{"id": f"AST-{100 + i}", "name": f"Device {i}", "department": department(i), "status": "Active"}
            for i in range(count)]


@pytest.fixture
def schema(rng):
    return make_schema(rng=rng)


@pytest.fixture
def controller(schema, clock):
    return CollectionController(schema, seed=[
        {"id": "AST-001", "name": "MacBook"},
        {"id": "AST-002", "name": "Monitor"},
    ], clock=clock)


@pytest.fixture
def big_controller(schema, clock):
    # 12 records, page size 5
    return CollectionController(schema, seed=make_records(12), clock=clock)
