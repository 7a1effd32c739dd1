"""Tests for MemberService counter maintenance."""

from collections.abc import Callable

from lendctl.domain.models import Member
from lendctl.services.members import MemberService
from tests.conftest import InMemoryLibraryStore


class TestMemberService:
    def test_increment(
        self, store: InMemoryLibraryStore, make_member: Callable[..., Member]
    ) -> None:
        member = make_member(books_checked_out=1)
        MemberService(store).increment_checkout_count(member)
        assert member.books_checked_out == 2
        assert store.writes == [("member", member.email)]

    def test_decrement(
        self, store: InMemoryLibraryStore, make_member: Callable[..., Member]
    ) -> None:
        member = make_member(books_checked_out=2)
        MemberService(store).decrement_checkout_count(member)
        assert member.books_checked_out == 1

    def test_decrement_never_goes_negative(
        self, store: InMemoryLibraryStore, make_member: Callable[..., Member]
    ) -> None:
        member = make_member(books_checked_out=0)
        MemberService(store).decrement_checkout_count(member)
        assert member.books_checked_out == 0
        assert store.writes == [("member", member.email)]
