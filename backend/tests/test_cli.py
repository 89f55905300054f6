from cli import build_form, main, parse_args
from test_form_controller import FakeSession, ok_response


def test_parse_args_collects_repeated_options():
    args = parse_args(["-i", "chicken", "-i", "rice", "-e", "Oven", "-c", "italian", "-t", "45"])

    assert args.ingredient == ["chicken", "rice"]
    assert args.equipment == ["Oven"]
    assert args.cuisine == "italian"
    assert args.time == 45
    assert args.url == "http://localhost:8000"


def test_build_form_fills_selections():
    args = parse_args(["-i", "chicken", "-i", " chicken ", "-e", "Grill", "-c", "thai", "-t", "15",
                       "--dietary", "vegan"])

    form = build_form(args, session=FakeSession())

    assert form.ingredients == ["chicken"]
    assert form.equipment == ["Grill"]
    assert (form.cuisine, form.time_available, form.dietary_restrictions) == ("thai", 15, "vegan")


def test_main_writes_markdown(tmp_path, monkeypatch, capsys):
    session = FakeSession(ok_response(source="template"))
    monkeypatch.setattr("form_controller.requests.Session", lambda: session)
    out = tmp_path / "recipes" / "bowl.md"

    main(["-i", "chicken", "-c", "asian", "-t", "30", "--out", str(out)])

    assert out.read_text(encoding="utf-8").startswith("# Garlic Chicken Rice Bowl")
    assert "Source: template" in capsys.readouterr().out
