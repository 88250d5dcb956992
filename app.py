import logging
from typing import List, Optional, Tuple

import gradio as gr

from config import FLAGS
from pronounce_core.index import PronouncingIndex
from pronounce_core.loader import load_dictionary
from pronounce_core.logging_utils import setup_logging
from pronounce_core.normalize import normalize_query
from pronounce_core.prosody import describe
from pronounce_core.rhymes import rhymes
from pronounce_core.search import RhymeFinder, word_frequency

setup_logging()
log = logging.getLogger(__name__)


# ---------- helpers ----------

def _pron_rows(index: PronouncingIndex, word: str) -> List[List[str]]:
    return [[r.label, " ".join(r.phones()), describe(r)] for r in index.lookup(word)]


def _verdict_md(index: PronouncingIndex, word: str, other: str) -> str:
    if not other:
        return ""
    a, b = index.lookup(word), index.lookup(other)
    missing = [w for w, rules in ((word, a), (other, b)) if not rules]
    if missing:
        return f"⚠️ Not in dictionary: {', '.join(missing)}"
    verdict = "rhyme ✅" if rhymes(a, b) else "do not rhyme ❌"
    return f"**{word}** and **{other}** {verdict}"


# ---------- main handler ----------

def make_handler(index: PronouncingIndex, finder: Optional[RhymeFinder] = None):
    finder = finder or RhymeFinder(index)
    case = str(FLAGS.get("QUERY_CASE", "lower"))

    def do_search(word: str, other: str, order: str, top: float) -> Tuple[str, list, str, list]:
        word = normalize_query(word, case)
        other = normalize_query(other, case)
        log.debug("Search request word=%s other=%s order=%s", word, other, order)
        if not word:
            return "", [], "", []

        rows = _pron_rows(index, word)
        header_md = f"**{word}** · {len(rows)} pronunciation(s)" if rows else f"**{word}** · not found"
        rhyme_rows = [
            [w, f"{word_frequency(w):.2f}", describe(index.lookup(w)[0])]
            for w in finder.find(word, limit=int(top), order=order)
        ]
        return header_md, rows, _verdict_md(index, word, other), rhyme_rows

    return do_search


# ---------- UI ----------

def build_ui(index: Optional[PronouncingIndex] = None):
    index = index if index is not None else load_dictionary()
    do_search = make_handler(index)

    with gr.Blocks() as demo:
        gr.Markdown(f"# Pronouncing dictionary\n{len(index)} words, {index.pronunciation_count} pronunciations")

        with gr.Row():
            word = gr.Textbox(label="Word", placeholder="")
            other = gr.Textbox(label="Does it rhyme with… (optional)", placeholder="")
        with gr.Row():
            order = gr.Radio(["common", "rare"], value=str(FLAGS.get("RHYME_ORDER", "common")), label="Rank rhymes")
            top = gr.Slider(5, 200, value=int(FLAGS.get("TOP_K", 20)), step=5, label="Max rhymes")

        btn = gr.Button("Look up", variant="primary")

        header = gr.Markdown(visible=True)
        out_prons = gr.Dataframe(
            headers=["Label", "Pronunciation", "Prosody"],
            datatype=["str", "str", "str"],
            label="Pronunciations",
            wrap=True,
        )
        verdict = gr.Markdown(visible=True)
        out_rhymes = gr.Dataframe(
            headers=["Word", "Zipf", "Prosody"],
            datatype=["str", "str", "str"],
            label="Rhyming words",
            wrap=True,
        )

        btn.click(do_search, [word, other, order, top], [header, out_prons, verdict, out_rhymes])

    demo.queue()
    return demo


if __name__ == "__main__":
    build_ui().launch()
