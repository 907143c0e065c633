"""Shared fixtures for the CEX parser tests."""

from __future__ import annotations

import pytest
from loguru import logger

SAMPLE_CEX = """\
// Sample library
#!cexversion
3.0

#!citelibrary
name|Sample library
urn|urn:cite2:cex:sample.2024:lib

#!datamodels
Collection|Model|Label|Description
urn:cite2:sample:images.v1:|urn:cite2:cite:datamodels.v1:imagemodel|Images|Image model
urn:cite2:sample:pages.v1:|urn:cite2:cite:datamodels.v1:tbsmodel|Pages|Text-bearing surfaces
urn:cite2:sample:maps.v1:|urn:cite2:cite:datamodels.v1:imagemodel|Maps|Image model

#!citerelationset
urn|urn:cite2:sample:dse.v1:
label|Diplomatic edition
passage|imageroi|surface
urn:cts:greekLit:tlg0012.tlg001:1.1|urn:cite2:sample:images.v1:img1@0.1,0.1,0.2,0.2|urn:cite2:sample:pages.v1:1r
urn:cts:greekLit:tlg0012.tlg001:1.2|urn:cite2:sample:images.v1:img1@0.1,0.3,0.2,0.2|urn:cite2:sample:pages.v1:1r

#!ctsdata
urn:cts:greekLit:tlg0012.tlg001:1.1|Sing, goddess
urn:cts:greekLit:tlg0012.tlg001:1.2|the wrath of Achilles
"""


@pytest.fixture
def sample_cex() -> str:
    return SAMPLE_CEX


@pytest.fixture
def log_messages():
    """Captures loguru records emitted by the package."""
    messages: list[str] = []
    logger.enable("cexparser")
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("cexparser")


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo handlers installed by main.setup_logging during CLI tests."""
    yield
    logger.remove()
    logger.disable("cexparser")
