from comic_ocr.ocr.assemble import accept_observation, assemble_text
from comic_ocr.ocr.model import Candidate, Rect, TextObservation


def _obs(text, width=0.5, height=0.05):
    return TextObservation(bbox=Rect(0.1, 0.1, width, height), candidates=[Candidate(text, 0.9)])


def test_accept_wide_box():
    assert accept_observation(_obs("x", width=0.5, height=1.0))


def test_accept_large_square_box():
    assert accept_observation(_obs("x", width=0.15, height=0.15))


def test_reject_narrow_small_box():
    assert accept_observation(_obs("x", width=0.01, height=0.05)) is False
    assert accept_observation(_obs("x", width=0.03, height=0.09)) is False


def test_small_square_box_passes_width_clause():
    # 0.05 >= 0.05 * 0.4
    assert accept_observation(_obs("x", width=0.05, height=0.05)) is True


def test_sentence_ending_line_gets_blank_line():
    assert assemble_text([[_obs("Hello world.")]]) == "Hello world.\n\n"


def test_mid_sentence_line_gets_single_break():
    assert assemble_text([[_obs("mid-line")]]) == "mid-line\n"


def test_question_and_exclamation_end_sentences():
    text = assemble_text([[_obs("Who?"), _obs("Me!"), _obs("and")]])
    assert text == "Who?\n\nMe!\n\nand\n"


def test_regions_assembled_in_order():
    text = assemble_text([[_obs("top")], [], [_obs("bottom.")]])
    assert text == "top\nbottom.\n\n"


def test_no_observations_gives_empty_string():
    assert assemble_text([]) == ""
    assert assemble_text([[], []]) == ""


def test_observation_without_candidates_is_skipped():
    empty = TextObservation(bbox=Rect(0, 0, 0.5, 0.1))
    assert assemble_text([[empty, _obs("kept")]]) == "kept\n"


def test_text_is_not_trimmed():
    assert assemble_text([[_obs("  spaced  ")]]) == "  spaced  \n"
