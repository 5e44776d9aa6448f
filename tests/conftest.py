"""Shared book fixtures shaped like mdbook's JSON."""

import copy

import pytest


def chapter(name, content, sub_items=None):
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": None,
            "sub_items": sub_items or [],
            "path": f"{name.lower()}.md",
            "source_path": f"{name.lower()}.md",
            "parent_names": [],
        }
    }


@pytest.fixture
def book():
    return {
        "sections": [
            {"PartTitle": "Foundations"},
            chapter("Sets", "{#theorem} Sets exist.\n{#proof}\nAxiom.\n{/proof}\n", [
                chapter("Power sets", "{#theorem} Cantor."),
                "Separator",
                chapter("Plain", "No markers here."),
            ]),
            "Separator",
            chapter("Empty", ""),
        ],
        "__non_exhaustive": None,
    }


@pytest.fixture
def context():
    return {
        "root": "/tmp/book",
        "config": {"book": {"title": "Notes"}},
        "renderer": "html",
        "mdbook_version": "0.4.40",
    }


@pytest.fixture
def pristine(book):
    return copy.deepcopy(book)
