import logging

import pytest

from services.chords import transpose_text
from services.transposition import effective_semitones, strip_chord_markup, transpose_sheet


@pytest.mark.parametrize("semitones, capo, expected", [
    (2, None, 2),
    (2, 0, 2),
    (2, 3, -1),
    (-1, 2, -3),
    (0, -2, 2),
])
def test_effective_semitones(semitones, capo, expected):
    assert effective_semitones(semitones, capo) == expected


def test_transpose_sheet_lists_chords_in_order():
    result = transpose_sheet("Am F\nG  C", 2)

    assert result.effective_semitones == 2
    assert [(c.original, c.transposed) for c in result.chords] == [
        ("Am", "Bm"), ("F", "G"), ("G", "A"), ("C", "D"),
    ]
    assert result.html == transpose_text("Am F\nG  C", 2)


def test_transpose_sheet_capo_cancels_shift():
    result = transpose_sheet("Am F\nG  C", 2, capo=2)

    assert result.semitones == 2
    assert result.capo == 2
    assert result.effective_semitones == 0
    assert [c.transposed for c in result.chords] == ["Am", "F", "G", "C"]


def test_transpose_sheet_without_chords():
    result = transpose_sheet("just words\n", 7)

    assert result.chords == []
    assert result.html == "just words\n"


def test_transpose_sheet_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="services.transposition"):
        transpose_sheet("G D Em C", 1, capo=3)

    assert "Transposed 4 chords" in caplog.text
    assert "effective=-2" in caplog.text


def test_strip_chord_markup_restores_layout():
    text = "  Intro:\tAm   F\n\nAmazing grace C/G how sweet\r\nG#m7 (E)\n"
    assert strip_chord_markup(transpose_text(text, 0)) == text


def test_strip_chord_markup_allows_retransposing():
    once = transpose_text("Am F", 2)
    twice = transpose_text(strip_chord_markup(once), 2)

    assert twice == '<span class="chord">C#m</span> <span class="chord">A</span>'


def test_strip_chord_markup_reads_flats_back_sharp():
    assert strip_chord_markup(transpose_text("Bb lyrics", 0)) == "A# lyrics"


def test_strip_chord_markup_unwraps_literal_spans_in_lyrics():
    html = transpose_text('say <span class="chord">hi</span>', 0)
    assert strip_chord_markup(html) == "say hi"


def test_strip_chord_markup_ignores_other_spans():
    html = '<span class="lyric">Am</span>'
    assert strip_chord_markup(html) == html
