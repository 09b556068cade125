import os
import sys
# Ensure project root is on sys.path for imports like 'voyager.*'
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from graphql import build_schema
from voyager.api.routes.voyager import register_voyager

LIBRARY_SDL = '''
"""Library API"""
schema {
  query: Query
}

scalar DateTime @specifiedBy(url: "https://tools.ietf.org/html/rfc3339")

directive @tag(name: String!) repeatable on FIELD_DEFINITION

"""A book in the catalogue"""
type Book {
  title: String
  isbn: String @deprecated(reason: "Use title")
  published: DateTime
}

input BookFilter {
  title: String
  legacyCode: String @deprecated(reason: "No longer indexed")
}

type Query {
  books(filter: BookFilter): [Book] @tag(name: "catalogue") @tag(name: "public")
}
'''


@pytest.fixture(scope="session")
def library_schema():
    return build_schema(LIBRARY_SDL)


@pytest.fixture
def make_client():
    def _make(config=None, **options):
        app = FastAPI()
        register_voyager(app, config, **options)
        return TestClient(app)
    return _make
