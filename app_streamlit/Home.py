# --------------------------------------------------------------
# File: Home.py
# Description: Página de demostración de Streamlit para el cifrado AES-GCM.
# --------------------------------------------------------------

import time

import streamlit as st

from gcm_cryptor import (
    CryptorError,
    checksum,
    decrypt,
    derive_key_b64,
    encrypt,
)

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="GCM Cryptor", page_icon="🔐", layout="centered")

st.title("🔐 GCM Cryptor")
st.write("Deriva una clave, cifra un mensaje con AES-GCM y vuelve a descifrarlo.")

state = st.session_state
state.setdefault("timestamp", str(int(time.time() * 1000)))
state.setdefault("generated_key", "")
state.setdefault("payload", "")
state.setdefault("nonce", "")
state.setdefault("tag", "")
state.setdefault("checksum", "")

# Paso 1: derivación de la clave a partir del secreto maestro y el timestamp.
st.subheader("1. Generar clave")
master_key = st.text_input("Master key", value="MySecretMasterKey")
timestamp = st.text_input("Timestamp", key="timestamp")
if st.button("Generar clave"):
    if not master_key or not timestamp:
        st.warning("Master key y timestamp son obligatorios.")
    else:
        try:
            state.generated_key = derive_key_b64(master_key, timestamp)
            st.success("Clave AES-128 derivada.")
        except CryptorError as exc:
            st.error(f"Error generando la clave: {exc}")
if state.generated_key:
    st.code(state.generated_key)

# Paso 2: cifrado del texto con la clave mostrada (bytes UTF-8 de la cadena).
st.subheader("2. Cifrar")
plaintext = st.text_area("Texto en claro", value='{"message": "Hello World"}')
if st.button("Cifrar"):
    if not state.generated_key:
        st.warning("Genera primero una clave.")
    else:
        try:
            envelope = encrypt(plaintext, state.generated_key)
            state.payload = envelope.payload
            state.nonce = envelope.nonce
            state.tag = envelope.tag
            state.checksum = checksum(plaintext.encode("utf-8"))
            st.success("Mensaje cifrado con AES-GCM.")
        except CryptorError as exc:
            st.error(f"Error cifrando: {exc}")

# Campos editables: permiten alterar el sobre y comprobar que se rechaza.
st.text_input("Payload (Base64)", key="payload")
st.text_input("Nonce (Base64)", key="nonce")
st.text_input("Tag (Base64)", key="tag")
if state.checksum:
    st.caption(f"Checksum SHA-256: {state.checksum}")

# Paso 3: descifrado de los campos tal como estén en pantalla.
st.subheader("3. Descifrar")
if st.button("Descifrar"):
    if not state.generated_key:
        st.warning("Genera primero una clave.")
    else:
        try:
            recovered = decrypt(state.payload, state.generated_key, state.nonce, state.tag)
            st.success("Autenticación correcta.")
            st.code(recovered)
        except CryptorError as exc:
            st.error(f"Error descifrando: {exc}")
