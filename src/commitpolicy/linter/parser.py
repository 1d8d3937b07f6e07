"""
Commit message parser.

Splits a message into header, body and footer, and the header into
``<type>(<scope>): <subject>``.

"""

from __future__ import annotations

import re

from .models import CommitMessage

# <type>(<scope>)!: <subject>
HEADER_PATTERN = re.compile(r"^(\w*)(?:\((.*)\))?(!?): (.*)$", re.ASCII)

# Issue references ("Closes #123", "Refs: https://...")
REFERENCE_PATTERN = re.compile(
	r"^(?:close[sd]?|fix(?:e[sd])?|resolve[sd]?|refs?|references|see)(?::[ \t]*|[ \t]+)"
	r"(?:(?:[\w.-]+/[\w.-]+)?#\d+|https?://\S)",
	re.IGNORECASE,
)
# Hyphenated git trailers ("Signed-off-by: ...", "Co-authored-by: ...")
TRAILER_PATTERN = re.compile(r"^\w+(?:-\w+)+(?:: | #)", re.ASCII)
BREAKING_PATTERN = re.compile(r"^BREAKING[ -]CHANGE: ")

# Everything below this line is dropped by git when committing with --verbose
SCISSORS = "# ------------------------ >8 ------------------------"

COMMENT_CHAR = "#"


def strip_comments(text: str, comment_char: str = COMMENT_CHAR) -> str:
	"""
	Remove git comment lines and the scissors section from a message.

	Args:
	        text: The raw message, as found in COMMIT_EDITMSG
	        comment_char: Git's core.commentChar

	Returns:
	        str: The message without comments or trailing blank lines

	"""
	kept: list[str] = []
	for line in text.replace("\r\n", "\n").split("\n"):
		if line == SCISSORS:
			break
		if line.startswith(comment_char):
			continue
		kept.append(line)
	while kept and not kept[-1].strip():
		kept.pop()
	while kept and not kept[0].strip():
		kept.pop(0)
	return "\n".join(kept)


def _starts_footer(line: str) -> bool:
	return bool(REFERENCE_PATTERN.match(line) or TRAILER_PATTERN.match(line))


def _find_footer(lines: list[str]) -> int | None:
	for index in range(1, len(lines)):
		line = lines[index]
		if BREAKING_PATTERN.match(line):
			return index
		starts_paragraph = not lines[index - 1].strip() and index > 1
		if starts_paragraph and _starts_footer(line):
			return index
	return None


def _join(lines: list[str]) -> str | None:
	text = "\n".join(lines).strip("\n")
	return text if text.strip() else None


def parse_commit_message(text: str) -> CommitMessage:
	"""
	Parse a commit message.

	The header is matched against ``<type>(<scope>)!: <subject>``; when it
	does not match, type, scope and subject are None. The footer starts at
	the first ``BREAKING CHANGE:`` line, or at the first paragraph that
	opens with an issue reference (``Closes #123``) or a hyphenated git
	trailer (``Signed-off-by: ...``). Other ``Word: text`` paragraphs are body.

	Args:
	        text: Commit message text

	Returns:
	        CommitMessage: The parsed message

	"""
	cleaned = strip_comments(text)
	lines = cleaned.split("\n")
	header = lines[0]

	commit_type = scope = subject = None
	breaking = False
	match = HEADER_PATTERN.match(header)
	if match:
		commit_type, scope, bang, subject = match.groups()
		breaking = bang == "!"

	footer_index = _find_footer(lines)
	body_end = footer_index if footer_index is not None else len(lines)
	body = _join(lines[1:body_end])
	footer = _join(lines[footer_index:]) if footer_index is not None else None
	if footer and any(BREAKING_PATTERN.match(line) for line in footer.split("\n")):
		breaking = True

	return CommitMessage(
		raw=cleaned,
		header=header,
		type=commit_type,
		scope=scope,
		subject=subject,
		body=body,
		footer=footer,
		breaking=breaking,
		lines=tuple(lines),
		footer_index=footer_index,
	)
