import click
from typing import List, Optional


class Prompter:
    def confirm(self, message: str) -> bool:
        raise NotImplementedError

    def text(self, message: str) -> str:
        raise NotImplementedError

    def select(self, message: str, choices: List[str]) -> str:
        raise NotImplementedError


class ClickPrompter(Prompter):
    """
    Terminal prompts. `select` is a searchable list: type a number to pick,
    or any text to narrow the list down by substring.
    """

    def confirm(self, message):
        return click.confirm(message, default=True)

    def text(self, message):
        return click.prompt(message, default="", show_default=False).strip()

    def select(self, message, choices):
        visible = list(choices)
        while True:
            click.echo(f"? {message}")
            for i, choice in enumerate(visible, start=1):
                click.echo(f"  {i}) {choice}")
            answer = click.prompt("Search or pick a number", default="", show_default=False).strip()

            picked = _pick(answer, visible)
            if picked is not None:
                return picked

            matches = [c for c in choices if answer.lower() in c.lower()]
            if len(matches) == 1:
                return matches[0]
            if not matches:
                click.echo(f"⚠️ Nothing matches '{answer}'.")
                visible = list(choices)
            else:
                visible = matches


def _pick(answer: str, visible: List[str]) -> Optional[str]:
    if answer.isdigit() and 1 <= int(answer) <= len(visible):
        return visible[int(answer) - 1]
    if answer in visible:
        return answer
    return None


class ScriptedPrompter(Prompter):
    """
    Answers prompts from a fixed list, in order. Every question asked is kept
    in `asked` as a (kind, message) tuple.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked = []

    def _next(self, kind, message):
        self.asked.append((kind, message))
        if not self.answers:
            raise RuntimeError(f"No scripted answer left for {kind} prompt: {message}")
        return self.answers.pop(0)

    def confirm(self, message):
        return bool(self._next("confirm", message))

    def text(self, message):
        return self._next("text", message)

    def select(self, message, choices):
        answer = self._next("select", message)
        if answer not in choices:
            raise ValueError(f"Scripted answer {answer!r} is not one of {choices}")
        return answer
