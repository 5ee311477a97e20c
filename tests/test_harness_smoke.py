import io
import threading
from pathlib import Path

from packages.datasets import new_dictionary
from packages.engine import RejectionReason
from packages.harness import GameSession, run_case, write_csv
from apps.cli.run import _play


def test_session_submit_records_accepted(plastic_puzzle, dictionary):
    s = GameSession(dictionary, plastic_puzzle)
    assert s.submit("clips").accepted
    assert s.submit("CLIPS").reason is RejectionReason.ALREADY_FOUND
    assert s.submit("panic").reason is RejectionReason.USES_DISALLOWED_LETTER
    assert s.found == ["clips"]
    assert s.score == 5
    # attic, capitals*, claps, clasp, clip, clips, plastic*, tactic
    assert s.max_score == 5 + 15 + 5 + 5 + 1 + 5 + 14 + 6


def test_concurrent_identical_guesses_credit_once(plastic_puzzle, dictionary):
    s = GameSession(dictionary, plastic_puzzle)
    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(s.submit("plastic"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sum(1 for o in results if o.accepted) == 1
    assert s.ledger.count() == 1


def test_run_case_smoke():
    d = new_dictionary("plastic attic clips")
    r = run_case(d, ["plastic", "PLASTIC", "xyz"], seed=42)
    assert sorted(r["letters"]) == sorted("PLASTIC")
    assert r["required"] == r["letters"][0]
    assert r["found"] == ["plastic"]
    assert [o["accepted"] for o in r["outcomes"]] == [True, False, False]
    assert r["outcomes"][0]["pangram"] is True
    assert r["outcomes"][1]["reason"] == "ALREADY_FOUND"
    assert r["outcomes"][2]["reason"] == "TOO_SHORT"
    assert r["score"] == 14


def test_run_case_is_reproducible(dictionary):
    a = run_case(dictionary, ["clips"], seed=3)
    b = run_case(dictionary, ["clips"], seed=3)
    assert a["letters"] == b["letters"] and a["outcomes"] == b["outcomes"]


def test_cli_play_loop(plastic_puzzle, dictionary, capsys):
    s = GameSession(dictionary, plastic_puzzle)
    lines = io.StringIO("clips\n\nxyz\n:score\nplastic\n:quit\nattic\n")
    rows = _play(s, lines)
    out = capsys.readouterr().out
    assert "xyz is too short!" in out
    assert "plastic *" in out
    assert "Found Words: 2" in out
    assert [r["guess"] for r in rows] == ["clips", "xyz", "plastic"]
    assert s.found == ["clips", "plastic"]


def test_write_csv(tmp_path: Path):
    p = write_csv([{"guess": "clips", "accepted": True, "extra": 1}],
                  str(tmp_path / "out" / "g.csv"), ["guess", "accepted", "reason"])
    text = Path(p).read_text(encoding="utf-8").splitlines()
    assert text[0] == "guess,accepted,reason"
    assert text[1] == "clips,True,"
