import sys

from main import Tee, uvicorn_command


def test_tee_writes_both_streams_and_closes_its_file(tmp_path, capsys):
    log_path = tmp_path / "api.log"
    original = sys.stdout
    tee = Tee(log_path)
    sys.stdout = tee
    try:
        print("hello")
    finally:
        tee.close()

    assert sys.stdout is original
    assert tee.log.closed
    assert log_path.read_text(encoding="utf-8") == "hello\n"
    assert "hello" in capsys.readouterr().out


def test_uvicorn_command_targets_the_api_app():
    cmd = uvicorn_command()
    assert cmd[:2] == ["uvicorn", "app.routes.api_server:app"]
    assert "--reload" in uvicorn_command(reload=True)
