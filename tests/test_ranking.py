"""Tests for directory ranking (paid, tier, brand name)."""

from itertools import permutations

from sellerhub.schemas import SellerRecord
from sellerhub.services.ranking import Tier, collation_key, rank_sellers


def _seller(brand: str, status: str | None = "free", is_paid: bool | None = False, sid: str | None = None) -> SellerRecord:
    return SellerRecord(
        id=sid or brand.lower().replace(" ", "-"),
        brand_name=brand,
        category="Fashion",
        status=status,
        is_paid=is_paid,
    )


def _brands(sellers: list[SellerRecord]) -> list[str]:
    return [s.brand_name for s in sellers]


def test_paid_before_unpaid_regardless_of_tier():
    sellers = [
        _seller("Unpaid Elite", status="elite", is_paid=False),
        _seller("Paid Free", status="free", is_paid=True),
    ]
    assert _brands(rank_sellers(sellers)) == ["Paid Free", "Unpaid Elite"]


def test_missing_paid_flag_counts_as_unpaid():
    sellers = [
        _seller("No Flag", status="elite", is_paid=None),
        _seller("Paid", status="premium", is_paid=True),
    ]
    assert _brands(rank_sellers(sellers)) == ["Paid", "No Flag"]


def test_tier_order_within_paid_bucket():
    sellers = [
        _seller("A Free", status="free", is_paid=True),
        _seller("B Premium", status="premium", is_paid=True),
        _seller("C Pro", status="pro", is_paid=True),
        _seller("D Elite", status="elite", is_paid=True),
    ]
    assert _brands(rank_sellers(sellers)) == ["D Elite", "C Pro", "B Premium", "A Free"]


def test_brand_name_breaks_ties():
    sellers = [
        _seller("Mid", status="pro", is_paid=True),
        _seller("Ace", status="pro", is_paid=True),
        _seller("Zed", status="pro", is_paid=True),
    ]
    assert _brands(rank_sellers(sellers)) == ["Ace", "Mid", "Zed"]


def test_status_is_case_insensitive():
    sellers = [
        _seller("Beta", status="pro", is_paid=True),
        _seller("Alpha", status="ELITE", is_paid=True),
    ]
    assert _brands(rank_sellers(sellers)) == ["Alpha", "Beta"]


def test_unknown_statuses_rank_after_free():
    sellers = [
        _seller("Banana", status="banana"),
        _seller("Missing", status=None),
        _seller("Empty", status=""),
        _seller("Zz Free", status="free"),
    ]
    ranked = _brands(rank_sellers(sellers))
    assert ranked[0] == "Zz Free"
    assert ranked[1:] == ["Banana", "Empty", "Missing"]


def test_tier_from_status():
    assert Tier.from_status("Premium") is Tier.PREMIUM
    assert Tier.from_status("free") is Tier.FREE
    assert Tier.from_status(None) is Tier.UNKNOWN
    assert Tier.from_status(3) is Tier.UNKNOWN
    assert Tier.from_status("gold") is Tier.UNKNOWN


def test_brand_collation_ignores_case_and_accents():
    sellers = [
        _seller("zulu"),
        _seller("Émile"),
        _seller("apple"),
        _seller("Banana"),
    ]
    assert _brands(rank_sellers(sellers)) == ["apple", "Banana", "Émile", "zulu"]
    assert collation_key("Émile")[0] == collation_key("emile")[0]


def test_rank_returns_new_list_and_does_not_mutate_input():
    sellers = [
        _seller("Zed", status="free"),
        _seller("Ace", status="elite", is_paid=True),
    ]
    snapshot = [s.model_copy() for s in sellers]

    ranked = rank_sellers(sellers)

    assert ranked is not sellers
    assert _brands(sellers) == ["Zed", "Ace"]
    assert sellers == snapshot


def test_duplicates_are_kept_in_input_order():
    first = _seller("Same", status="pro", is_paid=True, sid="one")
    second = _seller("Same", status="pro", is_paid=True, sid="two")

    ranked = rank_sellers([first, second])

    assert [s.id for s in ranked] == ["one", "two"]


def test_ranking_is_idempotent():
    sellers = [
        _seller("Kilo", status="premium", is_paid=True),
        _seller("Alpha", status="free"),
        _seller("Echo", status="elite"),
        _seller("Bravo", status="pro", is_paid=True),
    ]
    once = rank_sellers(sellers)
    assert rank_sellers(once) == once
    assert _brands(once) == ["Bravo", "Kilo", "Echo", "Alpha"]


def test_empty_input():
    assert rank_sellers([]) == []


def test_result_does_not_depend_on_input_order():
    sellers = [
        _seller("Zed", status="free", is_paid=False),
        _seller("Ace", status="elite", is_paid=False),
        _seller("Mid", status="pro", is_paid=True),
        _seller("Bob", status=None, is_paid=True),
    ]

    orders = {tuple(_brands(rank_sellers(list(p)))) for p in permutations(sellers)}

    assert orders == {("Mid", "Bob", "Ace", "Zed")}
