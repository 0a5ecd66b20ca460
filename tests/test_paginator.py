import pytest

from composershell.paginator import DialogResult, Paginator, PaginatorError


def make(pages):
    paginator = Paginator("Wizard")
    for page in pages:
        paginator.add_page(page)
    return paginator


def test_pages_hidden_until_started():
    paginator = make(["a", "b"])
    assert paginator.current_page is None
    paginator.start()
    assert paginator.current_page == "a"


def test_first_of_two_pages_buttons():
    paginator = make(["a", "b"]).start()
    assert paginator.back_button.visible is False
    assert paginator.next_button.visible is True
    assert paginator.finish_button.visible is False


def test_single_page_shows_finish_only():
    paginator = make(["only"]).start()
    assert paginator.next_button.visible is False
    assert paginator.finish_button.visible is True
    assert paginator.back_button.visible is False


def test_next_and_back_walk_pages():
    paginator = make(["a", "b", "c"]).start()
    paginator.next()
    assert paginator.current_page == "b"
    assert paginator.back_button.visible and paginator.next_button.visible
    paginator.next()
    assert paginator.current_page == "c"
    assert paginator.finish_button.visible
    assert not paginator.next_button.visible
    paginator.back()
    assert paginator.current_index == 1


def test_block_disables_next_and_finish():
    paginator = make(["a", "b"]).start()
    paginator.block(True)
    assert not paginator.next_button.enabled
    assert not paginator.finish_button.enabled
    with pytest.raises(PaginatorError):
        paginator.next()
    paginator.block(False)
    paginator.next()
    assert paginator.current_page == "b"


def test_back_on_first_page_is_rejected():
    paginator = make(["a", "b"]).start()
    with pytest.raises(PaginatorError):
        paginator.back()


def test_finish_hidden_before_last_page():
    paginator = make(["a", "b"]).start()
    with pytest.raises(PaginatorError):
        paginator.finish()


def test_finish_emits_finished_then_accepted():
    paginator = make(["a"]).start()
    events = []
    paginator.finished.connect(lambda result: events.append(("finished", result)))
    paginator.accepted.connect(lambda: events.append(("accepted",)))
    paginator.rejected.connect(lambda: events.append(("rejected",)))
    paginator.finish()
    assert events == [("finished", DialogResult.ACCEPTED), ("accepted",)]
    assert paginator.result is DialogResult.ACCEPTED


def test_cancel_emits_rejected_even_when_blocked():
    paginator = make(["a", "b"]).start()
    paginator.block(True)
    events = []
    paginator.rejected.connect(lambda: events.append("rejected"))
    paginator.cancel()
    assert events == ["rejected"]
    assert paginator.result is DialogResult.REJECTED


def test_set_page_out_of_range():
    paginator = make(["a"])
    with pytest.raises(IndexError):
        paginator.set_page(1)
    with pytest.raises(IndexError):
        make([]).start()


def test_restart_returns_to_first_page():
    paginator = make(["a", "b"]).start()
    paginator.next()
    paginator.finish()
    paginator.start()
    assert paginator.current_page == "a"
    assert paginator.result is None