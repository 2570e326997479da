import re
import threading

from moviemood.core.sessions import SessionRegistry, new_token


def test_new_token_is_uuid4_hex():
    token = new_token()
    assert re.fullmatch(r"[0-9a-f]{12}4[0-9a-f]{3}[89ab][0-9a-f]{15}", token)
    assert new_token() != token


def test_register_and_validate():
    registry = SessionRegistry()
    assert not registry.is_valid("abc")
    assert not registry.is_valid(None)
    assert not registry.is_valid("")
    session = registry.register("abc")
    assert registry.is_valid("abc")
    assert session.recommendations == ["", ""]
    assert registry.register("abc") is session


def test_issue_is_safe_under_concurrency():
    registry = SessionRegistry()
    tokens: list[str] = []
    lock = threading.Lock()

    def _worker():
        for _ in range(50):
            token = registry.issue().token
            with lock:
                tokens.append(token)

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(registry) == 400
    assert all(registry.is_valid(token) for token in tokens)
