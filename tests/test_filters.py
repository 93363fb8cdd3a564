"""List filters and the query strings they produce."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from pinata_sdk.models.filters import (
    JobStatus,
    KeyValueOp,
    KeyValueQuery,
    PinJobsFilter,
    PinListFilter,
    PinStatus,
    SortDirection,
)


def test_empty_jobs_filter_has_no_params():
    assert PinJobsFilter().to_params() == {}


@pytest.mark.parametrize(
    "filters, expected",
    [
        (PinJobsFilter().set_sort(SortDirection.ASC), {"sort": "ASC"}),
        (PinJobsFilter().set_status(JobStatus.PRECHECKING), {"status": "prechecking"}),
        (PinJobsFilter().set_ipfs_pin_hash("QmHash"), {"ipfs_pin_hash": "QmHash"}),
        (PinJobsFilter().set_limit(1), {"limit": 1}),
        (PinJobsFilter().set_offset(20), {"offset": 20}),
    ],
)
def test_each_jobs_field_adds_one_param(filters, expected):
    assert filters.to_params() == expected


def test_chained_jobs_filter_combines_params():
    filters = (
        PinJobsFilter()
        .set_sort(SortDirection.DESC)
        .set_status(JobStatus.SEARCHING)
        .set_ipfs_pin_hash("QmHash")
        .set_limit(10)
        .set_offset(0)
    )
    assert filters.to_params() == {
        "sort": "DESC",
        "status": "searching",
        "ipfs_pin_hash": "QmHash",
        "limit": 10,
        "offset": 0,
    }


def test_setters_leave_original_untouched():
    base = PinJobsFilter()
    base.set_limit(5)
    assert base.limit is None


def test_empty_pin_list_filter_has_no_params():
    assert PinListFilter().to_params() == {}


_WHEN = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "filters, expected",
    [
        (PinListFilter().set_hash_contains("QmSca"), {"hashContains": "QmSca"}),
        (PinListFilter().set_pin_start(_WHEN), {"pinStart": "2026-01-02T03:04:05+00:00"}),
        (PinListFilter().set_pin_end(_WHEN), {"pinEnd": "2026-01-02T03:04:05+00:00"}),
        (PinListFilter().set_unpin_start(_WHEN), {"unpinStart": "2026-01-02T03:04:05+00:00"}),
        (PinListFilter().set_unpin_end(_WHEN), {"unpinEnd": "2026-01-02T03:04:05+00:00"}),
        (PinListFilter().set_pin_size_min(10), {"pinSizeMin": 10}),
        (PinListFilter().set_pin_size_max(99), {"pinSizeMax": 99}),
        (PinListFilter().set_status(PinStatus.UNPINNED), {"status": "unpinned"}),
        (PinListFilter().set_page_limit(5), {"pageLimit": 5}),
        (PinListFilter().set_page_offset(15), {"pageOffset": 15}),
        (PinListFilter().set_metadata_name("N"), {"metadata[name]": "N"}),
        (
            PinListFilter().add_keyvalue("env", KeyValueQuery("prod")),
            {"metadata[keyvalues]": '{"env": {"value": "prod", "op": "eq"}}'},
        ),
    ],
)
def test_each_pin_list_field_adds_one_param(filters, expected):
    assert filters.to_params() == expected


def test_pin_list_filter_uses_camel_case_names():
    started = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    filters = (
        PinListFilter()
        .set_hash_contains("QmSca")
        .set_pin_start(started)
        .set_pin_size_min(10)
        .set_status(PinStatus.PINNED)
        .set_page_limit(5)
        .set_page_offset(15)
        .set_metadata_name("TaggedName")
    )
    assert filters.to_params() == {
        "hashContains": "QmSca",
        "pinStart": "2026-01-02T03:04:05+00:00",
        "pinSizeMin": 10,
        "status": "pinned",
        "pageLimit": 5,
        "pageOffset": 15,
        "metadata[name]": "TaggedName",
    }


def test_pin_list_keyvalue_queries_are_json_encoded():
    filters = (
        PinListFilter()
        .add_keyvalue("env", KeyValueQuery("prod"))
        .add_keyvalue("size", KeyValueQuery(1, KeyValueOp.BETWEEN, second_value=9))
    )
    params = filters.to_params()

    assert list(params) == ["metadata[keyvalues]"]
    assert json.loads(params["metadata[keyvalues]"]) == {
        "env": {"value": "prod", "op": "eq"},
        "size": {"value": 1, "op": "between", "secondValue": 9},
    }


async def test_client_sends_no_query_for_empty_filter(api, service):
    await api.get_pin_jobs()
    assert service.last.params == {}

    await api.get_pin_list(PinListFilter())
    assert service.last.params == {}


async def test_client_sends_filter_params(api, service):
    await api.get_pin_jobs(PinJobsFilter().set_sort(SortDirection.ASC).set_limit(1))

    assert service.last.path == "/pinning/pinJobs"
    assert service.last.params == {"sort": "ASC", "limit": "1"}
