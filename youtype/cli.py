"""YouType CLI - Command-line interface for dictation practice.

Primary Commands:
  - segments: Parse a subtitle file and show the merged practice segments
  - align: Attach a translation track to a primary track and show the result
  - grade: Grade one answer against a reference line
  - export-srt: Write merged practice segments back out as SRT
  - practice: Interactive dictation loop over a subtitle file
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import typer
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .analysis.alignment import AlignmentConfig
from .analysis.grading import grade_answer
from .analysis.segments import count_words
from .analysis.word_diff import diff_words
from .config import ACCURACY_THRESHOLD, MIN_WORDS_PER_SUBTITLE, PracticeSettings
from .parsers.subtitles import (
	SubtitleParseError,
	compose_srt,
	load_practice_segments,
	parse_subtitle_text,
)
from .parsers.timestamps import format_clock, format_seconds
from .pipelines.practice_session import PracticeSession
from .util.types import TimedSegment, WordComparison
from .util.youtube import extract_video_id, watch_url


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Log DEBUG messages (skipped cues, alignment stats)"),
) -> None:
	"""Dictation practice on subtitle files."""
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.WARNING,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)


def _read_subtitle(path: str) -> tuple[str, str]:
	"""Return (text, format) for a subtitle file on disk."""
	p = Path(path)
	if not p.is_file():
		raise typer.BadParameter(f"Subtitle file not found: {path}")
	ext = p.suffix.lower().lstrip(".")
	if ext not in ("srt", "vtt"):
		raise typer.BadParameter(f"Unsupported extension: {ext}")
	return p.read_bytes().decode("utf-8", errors="replace"), ext


def _load(path: str, settings: PracticeSettings, secondary: str | None = None, keep_closest: bool = False) -> List[TimedSegment]:
	text, ext = _read_subtitle(path)
	secondary_text = None
	if secondary:
		secondary_text, secondary_ext = _read_subtitle(secondary)
		if secondary_ext != ext:
			raise typer.BadParameter("Primary and secondary subtitles must share a format")
	try:
		return load_practice_segments(
			text,
			min_words=settings.min_words,
			secondary_text=secondary_text,
			fmt=ext,
			alignment=AlignmentConfig(keep_closest=keep_closest),
		)
	except SubtitleParseError as e:
		print(f"[red]Error:[/red] {e} ({path})")
		raise typer.Exit(code=1)


def _clip(s: str, width: int = 60) -> str:
	s = (s[: width - 1] + "…") if len(s) > width else s
	return escape(s)


def _segments_table(title: str, segments: List[TimedSegment], *, bilingual: bool = False) -> Table:
	table = Table(title=title)
	table.add_column("#", justify="right")
	table.add_column("Start")
	table.add_column("End")
	table.add_column("Words", justify="right")
	table.add_column("Text")
	if bilingual:
		table.add_column("Translation")
	for i, seg in enumerate(segments, 1):
		row = [str(i), format_seconds(seg.start), format_seconds(seg.end), str(count_words(seg.text)), _clip(seg.text)]
		if bilingual:
			row.append(_clip(seg.secondary_text) if seg.secondary_text else "[dim]—[/dim]")
		table.add_row(*row)
	return table


def _render_diff(diff: List[WordComparison]) -> str:
	"""Rich markup for a word diff: green correct, red wrong, yellow missing, struck extra."""
	parts = []
	for item in diff:
		if item.is_correct:
			parts.append(f"[green]{escape(item.word)}[/green]")
		elif item.is_missing:
			parts.append(f"[yellow]({escape(item.expected)})[/yellow]")
		elif item.is_extra:
			parts.append(f"[red strike]{escape(item.word)}[/red strike]")
		else:
			parts.append(f"[red]{escape(item.word)}[/red][dim]→{escape(item.expected)}[/dim]")
	return " ".join(parts)


@app.command(name="segments")
def segments_cmd(
	file: str = typer.Argument(..., help="Subtitle file (.srt/.vtt)"),
	min_words: int = typer.Option(MIN_WORDS_PER_SUBTITLE, "--min-words", help="Minimum words per practice segment"),
	raw: bool = typer.Option(False, "--raw", help="Show parsed cues without merging"),
) -> None:
	"""Show the practice segments of a subtitle file."""
	settings = PracticeSettings(min_words=min_words).clamped()
	if raw:
		text, ext = _read_subtitle(file)
		segments = parse_subtitle_text(text, ext)
		if not segments:
			print(f"[red]Error:[/red] could not parse subtitles ({file})")
			raise typer.Exit(code=1)
		title = f"Cues ({len(segments)})"
	else:
		segments = _load(file, settings)
		title = f"Practice segments ({len(segments)}, min {settings.min_words} words)"
	print(_segments_table(title, segments))


@app.command(name="align")
def align_cmd(
	primary: str = typer.Argument(..., help="Subtitle file in the language to transcribe"),
	secondary: str = typer.Argument(..., help="Translation subtitle file (same format)"),
	min_words: int = typer.Option(MIN_WORDS_PER_SUBTITLE, "--min-words", help="Minimum words per practice segment"),
	keep_closest: bool = typer.Option(False, "--keep-closest", help="Pick the nearest cue on tick collisions instead of the last one"),
) -> None:
	"""Align a translation track onto a primary track and show bilingual segments."""
	settings = PracticeSettings(min_words=min_words).clamped()
	segments = _load(primary, settings, secondary=secondary, keep_closest=keep_closest)
	matched = sum(1 for s in segments if s.secondary_text)
	print(_segments_table(f"Bilingual segments ({matched}/{len(segments)} with translation)", segments, bilingual=True))


@app.command(name="grade")
def grade_cmd(
	reference: str = typer.Argument(..., help="Reference line"),
	answer: str = typer.Argument(..., help="Learner's answer"),
	threshold: int = typer.Option(ACCURACY_THRESHOLD, "--threshold", help="Accuracy percent needed to pass"),
) -> None:
	"""Grade one answer and show word-level feedback when it fails."""
	settings = PracticeSettings(accuracy_threshold=threshold).clamped()
	result = grade_answer(reference, answer, settings.accuracy_threshold)
	if result.is_correct:
		print(f"[green]Correct[/green] ({result.accuracy}% accuracy)")
		return
	print(f"[red]Incorrect[/red] ({result.accuracy}% accuracy, need {settings.accuracy_threshold}%)")
	print(_render_diff(diff_words(reference, answer)))
	raise typer.Exit(code=2)


@app.command(name="export-srt")
def export_srt_cmd(
	file: str = typer.Argument(..., help="Subtitle file (.srt/.vtt)"),
	min_words: int = typer.Option(MIN_WORDS_PER_SUBTITLE, "--min-words", help="Minimum words per practice segment"),
	out: str | None = typer.Option(None, "--out", help="Write to this path instead of stdout"),
) -> None:
	"""Export merged practice segments as SRT text."""
	settings = PracticeSettings(min_words=min_words).clamped()
	srt_text = compose_srt(_load(file, settings))
	if out is None:
		typer.echo(srt_text, nl=False)
		return
	Path(out).write_text(srt_text, encoding="utf-8")
	print(f"[green]Wrote[/green] {out}")


@app.command(name="practice")
def practice_cmd(
	file: str = typer.Argument(..., help="Subtitle file (.srt/.vtt)"),
	secondary: str | None = typer.Option(None, "--secondary", help="Translation subtitle file shown as a hint"),
	min_words: int = typer.Option(MIN_WORDS_PER_SUBTITLE, "--min-words", help="Minimum words per practice segment"),
	threshold: int = typer.Option(ACCURACY_THRESHOLD, "--threshold", help="Accuracy percent needed to pass"),
	video: str | None = typer.Option(None, "--video", help="YouTube URL or id; prints a link per segment"),
) -> None:
	"""Type each segment; an empty answer skips, ':q' quits."""
	settings = PracticeSettings(min_words=min_words, accuracy_threshold=threshold).clamped()
	video_id = None
	if video:
		video_id = extract_video_id(video)
		if video_id is None:
			raise typer.BadParameter(f"Not a YouTube URL or video id: {video}")

	session = PracticeSession(_load(file, settings, secondary=secondary), settings)
	console = Console()
	while not session.is_finished:
		seg = session.current
		console.rule(f"Segment {session.current_index + 1}/{session.total}  {format_clock(seg.start)} - {format_clock(seg.end)}")
		if video_id:
			console.print(watch_url(video_id, seg.start))
		if seg.secondary_text:
			console.print(f"[dim]{escape(seg.secondary_text)}[/dim]")

		answer = typer.prompt("Your answer", default="", show_default=False)
		if answer.strip() == ":q":
			break
		if not answer.strip():
			if not session.next():
				break
			continue

		attempt = session.submit(answer)
		if attempt.is_correct:
			console.print(f"[green]Correct[/green] ({attempt.grade.accuracy}%)")
			if not session.next():
				break
		else:
			console.print(f"[red]Try again[/red] ({attempt.grade.accuracy}%)")
			console.print(_render_diff(attempt.diff))

	console.print(
		f"Completed {len(session.completed)}/{session.total} segments "
		f"({session.progress:.0%}) in {session.attempts} attempt(s)"
	)


if __name__ == "__main__":
	app()
