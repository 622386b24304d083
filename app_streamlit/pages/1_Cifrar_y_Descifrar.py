# --------------------------------------------------------------
# File: 1_Cifrar_y_Descifrar.py
# Description: Genera claves, cifra y descifra texto con secretbox desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from cryptohelper import (
    AuthenticationFailure,
    InvalidKey,
    InvalidPlaintext,
    MalformedCiphertext,
    RandomSourceFailure,
    decrypt,
    encrypt,
    generate_key,
)
from cryptohelper.config import DEFAULT_KEY

ERROR_MESSAGES = {
    InvalidKey: "La clave debe ser Base64 estándar de exactamente 32 bytes.",
    InvalidPlaintext: "El mensaje contiene caracteres que no se pueden codificar en UTF-8.",
    MalformedCiphertext: "El blob no es Base64 válido o es demasiado corto.",
    AuthenticationFailure: "El blob fue manipulado o la clave no es la correcta.",
    RandomSourceFailure: "La fuente aleatoria del sistema no está disponible.",
}


def _show_error(exc: Exception) -> None:
    """Muestra el mensaje de interfaz asociado al tipo de error recibido.

    Args:
        exc (Exception): Error terminal devuelto por cryptohelper.
    """
    st.error(ERROR_MESSAGES.get(type(exc), str(exc)))


# Presenta el título de la sección.
st.title("🔑 Cifrar y descifrar")

# Inicializa la clave de sesión con la configurada en el entorno, si existe.
if "key" not in st.session_state:
    st.session_state["key"] = DEFAULT_KEY or ""

if st.button("Generar clave nueva"):
    try:
        st.session_state["key"] = generate_key()
    except RandomSourceFailure as exc:
        _show_error(exc)

key = st.text_input("Clave (Base64)", key="key")

enc_tab, dec_tab = st.tabs(["Cifrar", "Descifrar"])

with enc_tab:
    message = st.text_area("Mensaje en claro")
    if st.button("Cifrar"):
        try:
            blob = encrypt(message, key)
        except (InvalidKey, InvalidPlaintext, RandomSourceFailure) as exc:
            _show_error(exc)
        else:
            st.success("Mensaje cifrado.")
            st.code(blob)

with dec_tab:
    blob_text = st.text_area("Blob cifrado (Base64)")
    if st.button("Descifrar"):
        try:
            recovered = decrypt(blob_text.strip(), key)
        except (InvalidKey, MalformedCiphertext, AuthenticationFailure) as exc:
            _show_error(exc)
        else:
            st.success("Autenticación correcta.")
            st.code(recovered)
