import streamlit as st
from settings import build_game, load_settings
from wordbank import WordListNotFoundError
from wordscramble import WordScramble

# ---------- App setup ----------
st.set_page_config(page_title="Word Scramble", page_icon="🔤", layout="centered")
st.title("🔤 Word Scramble")

# ---------- Load engine once ----------
if "engine" not in st.session_state:
    try:
        engine, words = build_game(load_settings())
    except WordListNotFoundError as e:
        st.error(f"Word Scramble can't start: {e}")
        st.stop()
    st.session_state.engine = engine.reset_round(words)
    st.session_state.words = words

eng: WordScramble = st.session_state.engine


def add_new_word():
    result = eng.submit(st.session_state.new_word)
    if result.accepted:
        st.session_state.new_word = ""
    elif not result.ignored:
        st.session_state.last_error = (result.title, result.message)


# ---------- Sidebar controls ----------
with st.sidebar:
    st.header("Game Controls")
    if st.button("🔁 New Game", use_container_width=True):
        eng.reset_round(st.session_state.words)
        st.session_state.new_word = ""
        st.rerun()

view = eng.view()

# ---------- Base word ----------
st.markdown("### Make words out of")
st.markdown(f"## :red[{view.base_word}]")

# ---------- Word input ----------
st.text_input("Enter your word here", key="new_word", on_change=add_new_word)

error = st.session_state.pop("last_error", None)
if error:
    title, message = error
    st.warning(f"**{title}**: {message}")

# ---------- Used words ----------
if not view.used_words:
    st.caption("No words yet.")
else:
    # newest first, with each word's letter count
    for w in view.used_words:
        st.write(f"**{len(w)}**  `{w}`")
