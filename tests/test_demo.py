import io

from chainlist.demo import main, run_demo


def transcript():
    buffer = io.StringIO()
    run_demo(buffer)
    return buffer.getvalue()


def test_initial_size_is_zero():
    assert "INITIAL SIZE: 0" in transcript()


def test_size_after_inserting():
    assert "SIZE AFTER INSERTING: 7" in transcript()


def test_two_insert_errors_reported():
    assert transcript().count("\nERROR:") == 2


def test_first_last_and_position():
    text = transcript()
    assert "FIRST ELEMENT: 85" in text
    assert "LAST ELEMENT: 101" in text
    assert "ELEMENT AT POSITION 3: 44" in text


def test_removals_reported():
    text = transcript()
    assert "POP FIRST: 85" in text
    assert "POP LAST: 101" in text
    assert "POP POSITION 2: 44" in text


def test_search_results():
    text = transcript()
    assert "SEARCHING FOR 4, POSITION: 3" in text
    assert "SEARCHING FOR 99, POSITION: -1" in text


def test_sorted_list_with_fifty_shown_twice():
    text = transcript()
    line = "{ -26 }{ 1 }{ 4 }{ 11 }{ 34 }{ 50 }{ 64 }{ 96 }"
    assert text.count(line) == 2


def test_main_writes_to_stdout(capsys):
    assert main() == 0
    captured = capsys.readouterr().out
    assert captured == transcript()