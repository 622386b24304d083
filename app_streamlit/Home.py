# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del formato.
# --------------------------------------------------------------

import streamlit as st

from cryptohelper.config import configure_logging
from cryptohelper.models import KEY_SIZE, MAC_SIZE, NONCE_SIZE

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Cryptohelper", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y el formato del blob cifrado.
st.title("🔐 Cryptohelper")
st.write("Cifrado de texto con NaCl secretbox (XSalsa20-Poly1305) y blobs en Base64.")
st.code(
    f"clave  = b64({KEY_SIZE} bytes aleatorios)\n"
    f"blob   = b64(nonce[{NONCE_SIZE}] || tag[{MAC_SIZE}] || ciphertext)"
)
st.info("Ve a **Cifrar y Descifrar** para generar una clave y proteger un mensaje.")
