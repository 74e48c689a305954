from unittest import mock

import pytest

from todolists import web


@pytest.fixture
def client():
    return web.create_app().test_client()


def test_main_menu_links_every_page():
    menu = web.main_menu()
    assert "TODO LIST MEMORY / WEB" in menu
    for path in ("/", "/todo-list", "/about-as"):
        assert f'href="{path}"' in menu
    assert menu.index("Home") < menu.index("Todo list") < menu.index("About as")


def test_page_home_content():
    page = web.page_home()
    assert page.startswith("<h2>PAGE HOME</h2>")
    assert "Section header" in page


def test_page_todo_list_content():
    page = web.page_todo_list()
    assert "PAGE TODO LIST" in page
    assert page.index("Section Header TL") < page.index("Section Body TL")


def test_page_about_as_content():
    page = web.page_about_as()
    assert "PAGE ABOUT AS" in page
    assert page.index("Section Header About As") < page.index("Section Body Abouts As")


@pytest.mark.parametrize(
    "path, builder",
    [("/", web.page_home), ("/todo-list", web.page_todo_list), ("/about-as", web.page_about_as)],
)
def test_routes_wrap_pages_in_menu(client, path, builder):
    response = client.get(path)
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert web.main_menu() in body
    assert builder() in body
    assert body.index(web.main_menu()) < body.index(builder())


def test_unknown_route_is_not_found(client):
    assert client.get("/blog/1").status_code == 404


def test_routes_reject_post(client):
    assert client.post("/todo-list").status_code == 405


def test_main_runs_app_with_given_address():
    with mock.patch("flask.Flask.run") as run:
        assert web.main(["--host", "0.0.0.0", "--port", "9000"]) == 0
    run.assert_called_once_with(host="0.0.0.0", port=9000)


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit):
        web.main(["--port", "notaport"])