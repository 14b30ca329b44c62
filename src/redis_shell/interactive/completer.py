from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..data.command_table import HELP_COMMANDS


class CommandCompleter(Completer):
    """
    Completes the command name at the start of the line from the help table.

    Matching is a case-insensitive prefix match; suggestions are offered in
    upper case with the command's group shown alongside.
    """

    def get_completions(self, document: Document, complete_event):
        text_before_cursor = document.text_before_cursor.lstrip()

        # Only the first word is a command name.
        if " " in text_before_cursor:
            return

        prefix = text_before_cursor.upper()
        for entry in HELP_COMMANDS:
            if entry.name.startswith(prefix):
                yield Completion(
                    text=entry.name,
                    start_position=-len(text_before_cursor),
                    display_meta=entry.group,
                )
