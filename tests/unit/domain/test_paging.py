"""Tests for sqla_crud/domain/models/paging.py and enums.py."""

import pytest
from pydantic import ValidationError

from sqla_crud.domain.models.enums import Direction
from sqla_crud.domain.models.paging import Order, Page, PageRequest, Sort


# --- Direction ---

def test_direction_from_string_is_case_insensitive():
    assert Direction.from_string("DESC") is Direction.DESC


def test_direction_from_string_rejects_unknown():
    with pytest.raises(ValueError):
        Direction.from_string("sideways")


def test_direction_is_ascending():
    assert Direction.ASC.is_ascending and not Direction.DESC.is_ascending


# --- Order / Sort ---

def test_order_defaults_to_ascending():
    assert Order(attribute="name").direction is Direction.ASC


def test_order_rejects_empty_attribute():
    with pytest.raises(ValidationError):
        Order(attribute="")


def test_order_with_ignore_case():
    assert Order.desc("name").with_ignore_case().ignore_case is True


def test_sort_by_builds_orders_in_sequence():
    s = Sort.by("name", "id")
    assert [o.attribute for o in s.orders] == ["name", "id"]


def test_sort_by_applies_direction():
    s = Sort.by("name", direction=Direction.DESC)
    assert s.orders[0].direction is Direction.DESC


def test_unsorted_is_not_sorted():
    assert Sort.unsorted().is_sorted is False


def test_descending_flips_every_order():
    s = Sort.by("name", "id").descending()
    assert all(o.direction is Direction.DESC for o in s.orders)


def test_ascending_restores_direction():
    s = Sort.by("name", direction=Direction.DESC).ascending()
    assert s.orders[0].direction is Direction.ASC


def test_and_concatenates():
    s = Sort.by("name").and_(Sort.by("id").descending())
    assert [(o.attribute, o.direction) for o in s.orders] == [
        ("name", Direction.ASC),
        ("id", Direction.DESC),
    ]


def test_sort_str():
    assert str(Sort.by("name")) == "name: ASC"
    assert str(Sort.unsorted()) == "UNSORTED"


# --- PageRequest ---

def test_page_request_offset():
    assert PageRequest.of(3, 10).offset == 30


def test_page_request_defaults_to_unsorted():
    assert PageRequest.of(0, 10).sort.is_sorted is False


def test_page_request_rejects_negative_page():
    with pytest.raises(ValidationError):
        PageRequest(page=-1, size=10)


def test_page_request_rejects_zero_size():
    with pytest.raises(ValidationError):
        PageRequest(page=0, size=0)


def test_page_request_next_and_previous():
    req = PageRequest.of(1, 5)
    assert req.next().page == 2
    assert req.previous_or_first().page == 0
    assert PageRequest.of(0, 5).previous_or_first().page == 0


# --- Page ---

def _page(content, page=0, size=2, total=5):
    return Page.of(content, PageRequest.of(page, size), total)


def test_page_total_pages_rounds_up():
    assert _page(["a", "b"]).total_pages == 3


def test_page_total_pages_zero_when_empty():
    assert _page([], total=0).total_pages == 0


def test_page_number_of_elements():
    assert _page(["a"], page=2).number_of_elements == 1


def test_first_page_navigation():
    p = _page(["a", "b"])
    assert p.is_first and p.has_next and not p.has_previous and not p.is_last


def test_last_page_navigation():
    p = _page(["e"], page=2)
    assert p.is_last and p.has_previous and not p.has_next


def test_page_map_converts_content_and_keeps_metadata():
    p = _page([1, 2], page=1).map(str)
    assert p.content == ["1", "2"]
    assert (p.number, p.size, p.total_elements) == (1, 2, 5)
