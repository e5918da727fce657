"""An interactive introductory course survey that records its answers."""

from __future__ import annotations

import getpass
import os
import sys
from dataclasses import dataclass
from datetime import date
from typing import Callable, Sequence, TextIO

MAX_ANSWER_SIZE = 1000
QUESTION_COUNT = 36
SURVEY_FILENAME = "survey"

_DEPARTMENT_CODES = """
    AAS AFS AMS ANT AOS APC ARA ARC ART ASA ASL AST ATL BCS CBE CEE
    CGS CHI CHM CHV CLA CLG COM COS CTL CWR CZE DAN EAS ECE ECO ECS
    EEB EGR ENE ENG ENT ENV EPS FIN FRE FRS GEO GER GHP GLS GSS HEB
    HIN HIS HLS HOS HPD HUM ISC ITA JDS JPN JRN KOR LAO LAS LAT LCA
    LIN MAE MAT MED MOD MOG MOL MPP MSE MTD MUS NES NEU ORF PAW PER
    PHI PHY PLS POL POP POR PSY QCB REL RES RUS SAN SAS SLA SML SOC
    SPA SPI STC SWA THR TPP TRA TUR TWI URB URD VIS WRI
"""

AFFILIATIONS = frozenset(_DEPARTMENT_CODES.split()) | {"undeclared", "other", "N/A"}
DEGREES = frozenset({"AB", "BSE", "grad", "HS", "N/A"})
RATINGS = frozenset(str(n) for n in range(6))


def current_academic_year(today: date | None = None) -> int:
    """Return the academic year: the calendar year, plus one from August on."""
    if today is None:
        today = date.today()
    return today.year + 1 if today.month >= 8 else today.year


def is_valid_year(answer: str, today: date | None = None) -> bool:
    """Return True iff answer is "N/A" or a graduation year within four years."""
    if answer == "N/A":
        return True
    if len(answer) != 4 or not (answer.isascii() and answer.isdigit()):
        return False
    current = current_academic_year(today)
    return current <= int(answer) <= current + 4


def is_valid_affiliation(answer: str) -> bool:
    """Return True iff answer is a known department code or special choice."""
    return answer in AFFILIATIONS


def is_valid_degree(answer: str) -> bool:
    """Return True iff answer is a known degree."""
    return answer in DEGREES


def is_valid_rating(answer: str) -> bool:
    """Return True iff answer is a rating from 0 to 5."""
    return answer in RATINGS


@dataclass(frozen=True)
class Question:
    """A survey question, the check its answer must pass, and text shown before it."""

    text: str
    validator: Callable[[str], bool]
    preamble: str = ""


_CHOICE_INDENT = "\n    "

_PREREQUISITES = (
    "took COS 126",
    "took ECE 115",
    "COS placement exam",
    "special permission / other",
)

_INSTRUCTIONS = "".join(
    line + "\n"
    for line in (
        "State your expertise in each topic. Use a 5-point scale",
        'where 5 means "I know this topic very well" and 0',
        'means "I know nothing about this topic". Please enter',
        "only integers (no decimal points).",
    )
)

_RATED_TOPICS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Number systems", (
        "Binary number system",
        "Hexadecimal number system",
        "Representation of signed integers (e.g., 2's complement)",
    )),
    ("Linux operating system", (
        "Linux operating system, in general",
        "Fundamental commands (cd, ls, cat, etc.)",
        "Redirection (< and >) and pipes ( | )",
        "Background processes via Ctrl-z",
    )),
    ("GNU Programming Environment", (
        "GNU programming environment, in general",
        "The emacs editor",
        "The gcc compiler driver",
        "The gdb debugger",
        "The make project maintenance tool",
    )),
    ("Java programming language", (
        "Java programming language, in general",
        "Java control stmts (if, switch, for, while, do, break)",
        "Java methods",
        "Java arrays",
        "Java classes",
    )),
    ("C programming language", (
        "C programming language, in general",
        "C control stmts (if, switch, for, while, do, break)",
        "C functions",
        "C arrays",
        "C structures",
        "C preprocessor directives (#include, #define, etc.)",
        "C interface (.h) files",
        "C pointers and pointer operators (* and &)",
        "C dynamic memory mgmt (malloc, calloc, realloc, free)",
        "C void pointers",
        "C function pointers",
        "C abstract data types (ADTs)",
    )),
    ("ARMv8 architecture and assembly language", (
        "ARMv8 architecture",
        "ARMv8 assembly language",
    )),
)


def _rated_questions() -> list[Question]:
    questions = []
    for number, (title, subjects) in enumerate(_RATED_TOPICS, start=1):
        heading = f"\nTopic {number}: {title}\n\n"
        if number == 1:
            heading = "\n" + _INSTRUCTIONS + heading
        for position, subject in enumerate(subjects):
            questions.append(Question(
                f"{subject} (0-5)?",
                is_valid_rating,
                heading if position == 0 else "",
            ))
    return questions


QUESTIONS: tuple[Question, ...] = (
    Question(
        "What is your concentration (or program, affiliation, etc.)?"
        + _CHOICE_INDENT
        + "[COS, MAT, PHI, URB, ..., undeclared, other, N/A]? ",
        is_valid_affiliation,
    ),
    Question(
        "What degree are you pursuing?"
        + _CHOICE_INDENT
        + "[" + ", ".join(("AB", "BSE", "grad", "HS", "N/A")) + "]?",
        is_valid_degree,
        "\n",
    ),
    Question(
        "What is your expected graduation year (4 digits, N/A)?",
        is_valid_year,
        "\n",
    ),
    Question(
        "How did you satisfy the prerequisite for this class?"
        + _CHOICE_INDENT
        + "["
        + ", ".join(f"{n}: {way}" for n, way in enumerate(_PREREQUISITES))
        + "]",
        is_valid_rating,
        "\n",
    ),
    Question(
        "Have you already taken COS 226? [0: no, 1: yes]",
        is_valid_rating,
        "\n",
    ),
    *_rated_questions(),
)


class Survey:
    """Asks questions on one stream and records questions and answers on another."""

    def __init__(
        self,
        questions: Sequence[Question] = QUESTIONS,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        record: TextIO | None = None,
    ) -> None:
        if record is None:
            raise ValueError("a record stream is required")
        self.questions = tuple(questions)
        self.input = input_stream if input_stream is not None else sys.stdin
        self.output = output_stream if output_stream is not None else sys.stdout
        self.record = record
        self._number = 1

    def _read_answer(self) -> str:
        line = self.input.readline(MAX_ANSWER_SIZE - 1)
        if line == "":
            raise EOFError("input ended before the survey was complete")
        return line.split("\n", 1)[0]

    def ask(self, question: Question) -> str:
        """Ask until the answer is valid, record it, and return it."""
        self.output.write(question.preamble)
        self.output.write(f"({self._number}) {question.text}\n")
        answer = self._read_answer()
        while not question.validator(answer):
            self.output.write("Please try again.\n")
            self.output.write(f"{question.text}\n")
            answer = self._read_answer()
        self._number += 1
        self.record.write(f"{question.text}\n{answer}\n")
        return answer

    def run(self, username: str) -> list[str]:
        """Conduct the whole survey and return the answers in order."""
        self.output.write("Welcome to the Introductory Survey for COS 217.\n\n")
        self.record.write(f"Student's username\n{username}\n")
        self.output.write(f"There are {QUESTION_COUNT} questions.\n\n")
        answers = [self.ask(question) for question in self.questions]
        self.output.write("\n")
        return answers


def _username() -> str:
    try:
        return os.getlogin()
    except OSError:
        return getpass.getuser()


def main(argv: list[str] | None = None) -> int:
    """Run the survey on stdin/stdout, writing a file named survey."""
    if argv is None:
        argv = sys.argv[1:]
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "conductsurvey"
    if argv:
        print(f"Usage: {prog}", file=sys.stderr)
        return 1
    try:
        record = open(SURVEY_FILENAME, "w", encoding="utf-8")
    except OSError:
        print("Failed to open survey file.", file=sys.stderr)
        return 1
    with record:
        Survey(QUESTIONS, sys.stdin, sys.stdout, record).run(_username())
    print("Congratulations on completing the Introductory Survey.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())