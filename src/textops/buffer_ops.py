"""
Explorer for mutable string-buffer operations.

Builds a StringBuffer from one string and mutates it step by step using a
second string as the parameter, printing the buffer after every step.
"""

from typing import TextIO

from .buffer import StringBuffer
from .explorer import run_operation
from .models import ExplorationReport
from .output import print_report


class StringBufferOperations:
    """
    Demonstrates StringBuffer methods on a single starting value.

    Steps are cumulative: each one operates on the buffer as left by the
    previous step. A step that fails leaves the buffer unchanged.
    """

    TITLE = "StringBuffer Methods"

    def __init__(self, value: str) -> None:
        self.value = value

    def explore_string_buffer_methods(
        self, param: str, out: TextIO | None = None
    ) -> ExplorationReport:
        """
        Run every demonstrated step, print the report and return it.

        Args:
            param: String used as the argument of the mutating steps
            out: Stream to print to (default: standard output)

        Returns:
            ExplorationReport with one result per step, in order
        """
        value = self.value
        buf = StringBuffer(value)

        steps = [
            ("length()", lambda: buf.length()),
            ("capacity()", lambda: buf.capacity()),
            ("append(param)", lambda: str(buf.append(param))),
            ("insert(0, param)", lambda: str(buf.insert(0, param))),
            ("index_of(param)", lambda: buf.index_of(param)),
            (
                "replace(0, len(param), upper(param))",
                lambda: str(buf.replace(0, len(param), param.upper())),
            ),
            ("reverse()", lambda: str(buf.reverse())),
            ("reverse() again", lambda: str(buf.reverse())),
            ("delete(0, len(param))", lambda: str(buf.delete(0, len(param)))),
            ("delete_char_at(0)", lambda: str(buf.delete_char_at(0))),
            ("set_char_at(0, param[0])", lambda: str(buf.set_char_at(0, param[0]))),
            ("set_length(len(value))", lambda: str(buf.set_length(len(value)))),
            ("to_string()", lambda: buf.to_string()),
            ("final length()", lambda: buf.length()),
            ("final capacity()", lambda: buf.capacity()),
        ]

        report = ExplorationReport(
            title=self.TITLE,
            subject={"value": value, "param": param},
            results=[run_operation(label, func) for label, func in steps],
        )
        print_report(report, out)
        return report
