from _01_puzzle import formatting
from _01_puzzle.exceptions import ErrorCode
from _01_puzzle.state import GameStart, LeaderboardEntry, Rejection, SubmissionResult, TraceEntry


def make_result(is_new_record: bool) -> SubmissionResult:
    trace = (TraceEntry("➕", 1, 6), TraceEntry("✖️", 6, 12))
    return SubmissionResult(trace=trace, final_value=12, is_new_record=is_new_record, record=40)


def test_trace_lines():
    assert formatting.trace_lines(make_result(True)) == ["➕: 1 → 6", "✖️: 6 → 12"]


def test_result_text_reports_record():
    assert "🏆 New record!" in formatting.result_text(make_result(True))
    text = formatting.result_text(make_result(False))
    assert "Current record: 40" in text
    assert text.startswith("🔢 Starting number: 1")


def test_start_text_lists_offer():
    game = GameStart(seed_value=1, offered_symbols=tuple("abcdefghijklmno"))
    text = formatting.start_text(game)
    assert "a b c d e f g h i j k l m n o" in text
    assert "Combination: a b c d e f g h" in text


def test_help_text():
    text = formatting.help_text([("➕", "Adds 5 to the number")])
    assert "➕ - Adds 5 to the number" in text


def test_leaderboard_text_numbers_rows():
    assert formatting.leaderboard_text([]) == "No records yet. Play the first game!"
    text = formatting.leaderboard_text([LeaderboardEntry("u1", 99), LeaderboardEntry("u2", 5)])
    assert "1. ID: u1 - 99" in text
    assert "2. ID: u2 - 5" in text


def test_rejection_text():
    rejection = Rejection(ErrorCode.WRONG_LENGTH, "Combination must contain exactly 8 symbols, got 2")
    assert formatting.rejection_text(rejection).endswith("got 2")


def test_welcome_text_states_rules():
    text = formatting.welcome_text()
    assert "Welcome to Emoji Math" in text
    assert "combination of 8 symbols" in text
    assert "only once per game" in text
