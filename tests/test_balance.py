"""Test the bracket/quote balance tracker."""

from autoseg.core.balance import BalanceTracker


class TestBalanceTracker:
    
    def test_initial_state(self):
        tracker = BalanceTracker()
        assert tracker.brackets == 0
        assert tracker.quotes == 0
        assert tracker.in_straight_quote is False
        assert not tracker.is_merging()
    
    def test_open_and_close_brackets(self):
        tracker = BalanceTracker()
        tracker.update("[a (b")
        assert tracker.brackets == 2
        assert tracker.is_merging()
        
        tracker.update(")")
        assert tracker.brackets == 1
        tracker.update("]")
        assert tracker.brackets == 0
        assert not tracker.is_merging()
    
    def test_unmatched_closers_never_go_negative(self):
        tracker = BalanceTracker()
        tracker.update(")]}")
        assert tracker.brackets == 0
        tracker.update("(")
        assert tracker.is_merging()
    
    def test_quotes_are_tracked_but_do_not_merge(self):
        tracker = BalanceTracker()
        tracker.update("‘‘itipi")
        assert tracker.quotes == 2
        assert not tracker.is_merging()
        
        tracker.update("’’’")
        assert tracker.quotes == 0
    
    def test_straight_quote_toggles(self):
        tracker = BalanceTracker()
        tracker.update('"')
        assert tracker.in_straight_quote is True
        tracker.update("it's")
        assert tracker.in_straight_quote is False
        assert not tracker.is_merging()
    
    def test_state_persists_across_updates(self):
        tracker = BalanceTracker()
        for part in ["[bhagavāti ", "(syā.), ", "dī. ni. ", "1.157, "]:
            tracker.update(part)
            assert tracker.is_merging()
        tracker.update("sameti].")
        assert not tracker.is_merging()
    
    def test_non_ascii_brackets(self):
        tracker = BalanceTracker()
        tracker.update("「")  # Ps
        assert tracker.is_merging()
        tracker.update("」")
        assert not tracker.is_merging()
    
    def test_copy_is_independent(self):
        tracker = BalanceTracker()
        tracker.update("(")
        snapshot = tracker.copy()
        tracker.update(")")
        assert snapshot.brackets == 1
        assert tracker.brackets == 0
