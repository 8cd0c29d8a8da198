"""Tests for the ambient style and scope stack."""

from stylemark.scopes import ScopeKind, StyleScope, format_styles

SKIP_PUSH = frozenset((ScopeKind.PUSH,))


class TestStyleScope:
    def test_push_snapshot_is_a_copy(self) -> None:
        scope = StyleScope()
        scope.set("color", "red")
        scope.push(ScopeKind.PUSH)
        scope.set("color", "blue")
        assert scope.frames[-1].saved_styles == {"color": "red"}

    def test_pop_matching_restores(self) -> None:
        scope = StyleScope()
        scope.set("color", "red")
        scope.push(ScopeKind.PUSH)
        scope.set("font-size", "2em")
        assert scope.pop_matching(ScopeKind.PUSH) is True
        assert scope.styles == {"color": "red"}
        assert scope.depth == 0

    def test_pop_from_empty_stack_is_unbalanced(self) -> None:
        scope = StyleScope()
        scope.set("color", "red")
        assert scope.pop_matching(ScopeKind.PUSH) is False
        assert scope.styles == {"color": "red"}

    def test_pop_with_other_kind_on_top_is_unbalanced(self) -> None:
        scope = StyleScope()
        scope.push(ScopeKind.SECTION)
        scope.set("color", "red")
        assert scope.pop_matching(ScopeKind.PUSH) is False
        assert scope.depth == 1
        assert scope.styles == {"color": "red"}

    def test_skip_kinds_are_discarded_without_restoring(self) -> None:
        scope = StyleScope()
        scope.push(ScopeKind.SECTION)
        scope.set("color", "red")
        scope.push(ScopeKind.PUSH)
        scope.set("color", "blue")
        scope.push(ScopeKind.PUSH)
        assert scope.pop_matching(ScopeKind.SECTION, SKIP_PUSH) is True
        assert scope.styles == {}
        assert scope.depth == 0

    def test_skipped_frames_stay_discarded_on_mismatch(self) -> None:
        scope = StyleScope()
        scope.push(ScopeKind.BLOCK_QUOTE)
        scope.push(ScopeKind.PUSH)
        assert scope.pop_matching(ScopeKind.SECTION, SKIP_PUSH) is False
        assert scope.top_kind is ScopeKind.BLOCK_QUOTE

    def test_snapshot_and_restore_are_independent(self) -> None:
        scope = StyleScope()
        scope.set("color", "red")
        snap = scope.snapshot()
        snap["color"] = "blue"
        assert scope.styles == {"color": "red"}
        scope.restore(snap)
        snap["color"] = "green"
        assert scope.styles == {"color": "blue"}

    def test_reset(self) -> None:
        scope = StyleScope()
        scope.set("color", "red")
        scope.push(ScopeKind.PUSH)
        scope.reset()
        assert scope.styles == {}
        assert scope.depth == 0
        assert scope.top_kind is None

    def test_styles_property_is_a_copy(self) -> None:
        scope = StyleScope()
        scope.styles["color"] = "red"
        assert scope.styles == {}


class TestFormatStyles:
    def test_insertion_order(self) -> None:
        assert format_styles({"color": "red", "font-size": "2em"}) == "color:red;font-size:2em;"

    def test_empty(self) -> None:
        assert format_styles({}) == ""

    def test_overwrite_keeps_position(self) -> None:
        scope = StyleScope()
        scope.set("color", "red")
        scope.set("font-size", "2em")
        scope.set("color", "blue")
        assert format_styles(scope.styles) == "color:blue;font-size:2em;"
