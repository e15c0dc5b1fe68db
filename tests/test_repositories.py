from __future__ import annotations

import pytest

from conftest import usuario_api
from gestion_usuarios.infrastructure.api_client import RespuestaInvalidaAPI
from gestion_usuarios.infrastructure.repositories import UserRepository
from gestion_usuarios.models.user import Borrador, User


def test_mapea_campos_del_backend(api):
    api.listado = [usuario_api("a-1", "Ana", "ana@x.com", "1"), usuario_api(2, "Bruno", "b@x.com", "2")]

    usuarios = UserRepository(api).obtener_usuarios()

    assert usuarios == [User("a-1", "Ana", "ana@x.com", "1"), User(2, "Bruno", "b@x.com", "2")]


def test_elemento_sin_campo_es_respuesta_invalida(api):
    api.listado = [{"id": 1, "nombreCompleto": "Ana", "correoElectronico": "a@x.com"}]

    with pytest.raises(RespuestaInvalidaAPI, match="numeroTelefono"):
        UserRepository(api).obtener_usuarios()


def test_elemento_que_no_es_objeto(api):
    api.listado = ["Ana"]

    with pytest.raises(RespuestaInvalidaAPI):
        UserRepository(api).obtener_usuarios()


def test_payload_usa_nombres_del_backend(api):
    UserRepository(api).actualizar(3, Borrador("Ana", "ana@x.com", "555"))

    assert api.llamadas == [
        ("PUT", 3, {"nombreCompleto": "Ana", "correoElectronico": "ana@x.com", "numeroTelefono": "555"})
    ]


def test_campo_nulo_se_convierte_en_texto_vacio(api):
    api.listado = [usuario_api(1, "Ana", None, "1")]

    assert UserRepository(api).obtener_usuarios() == [User(1, "Ana", "", "1")]


def test_campo_que_no_es_texto_es_respuesta_invalida(api):
    api.listado = [usuario_api(1, "Ana", "ana@x.com", 5551234)]

    with pytest.raises(RespuestaInvalidaAPI, match="numeroTelefono"):
        UserRepository(api).obtener_usuarios()
