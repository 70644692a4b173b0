from coursebook.greetings import greeting, main


def test_greeting_for_bob():
    assert greeting("Bob") == "Hello Bob, it is very nice to meet you!"


def test_greeting_contains_name():
    message = greeting("Alice")
    assert message.startswith("Hello Alice,")
    assert message.endswith("meet you!")


def test_main_wraps_to_narrow_column(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) > 1
    assert all(len(line) <= 24 for line in lines)
    assert " ".join(lines).split() == greeting("Bob").split()


def test_main_uses_given_name(capsys):
    assert main(["Carol"]) == 0
    out = capsys.readouterr().out
    assert " ".join(out.split()) == greeting("Carol")