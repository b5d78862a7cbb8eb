import pytest

from olx_crawler.prompter import ConsolePrompter


def scripted_input(answer):
    asked = []

    def _input(prompt):
        asked.append(prompt)
        return answer

    return _input, asked


@pytest.mark.parametrize(
    "answer, expected",
    [("", True), ("y", True), ("n", False), ("Y", False), ("yes", False), (" y", False)],
)
def test_confirm(answer, expected):
    input_func, asked = scripted_input(answer)
    prompter = ConsolePrompter(automatic=False, input_func=input_func)
    assert prompter.confirm("Next page?") is expected
    assert asked == ["Next page? y/n(default y)"]


def test_automatic_does_not_read_input():
    input_func, asked = scripted_input("n")
    prompter = ConsolePrompter(automatic=True, input_func=input_func)
    assert prompter.confirm("Open this ad: flat?") is True
    assert asked == []


def test_automatic_defaults_to_config():
    assert ConsolePrompter().automatic is False
