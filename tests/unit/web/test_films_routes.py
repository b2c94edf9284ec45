"""
Tests des routes /Films : liste filtree, fiche, creation, edition, suppression.

Le client est branche sur une base en memoire chargee avec les donnees de
reference (5 films, genre 4 = Фантастика).
"""

import html
import re

import pytest


def page(response) -> str:
    """HTML de la reponse avec les entites decodees."""
    return html.unescape(response.text)


def cells(response, css_class: str) -> list[str]:
    """Contenu texte des cellules <td class="..."> du tableau."""
    raw = re.findall(rf'<td class="{css_class}">(.*?)</td>', page(response), re.S)
    return [re.sub(r"<[^>]+>", "", value).strip() for value in raw]


VALID_FORM = {
    "title": "Тестовий фільм",
    "year": "2024",
    "description": "Опис тестового фільму",
    "rating": "7.5",
    "genre_id": "1",
    "director_id": "1",
}


class TestFilmIndex:
    def test_list(self, client):
        response = client.get("/Films")
        assert response.status_code == 200
        assert "<title>Фільми" in response.text
        assert 'id="films-table"' in response.text
        assert len(cells(response, "film-title")) == 5

    def test_index_alias(self, client):
        response = client.get("/Films/Index")
        assert response.status_code == 200
        assert len(cells(response, "film-title")) == 5

    def test_sorted_by_rating(self, client):
        titles = cells(client.get("/Films"), "film-title")
        assert titles == ["Список Шіндлера", "Кримінальне чтиво", "Початок", "Інтерстеллар", "Дюна"]

    def test_search_controls_present(self, client):
        text = client.get("/Films").text
        for element_id in ("search-input", "genre-filter", "search-button"):
            assert f'id="{element_id}"' in text
        assert 'name="searchString"' in text
        assert 'name="genreId"' in text

    def test_filter_by_genre(self, client):
        response = client.get("/Films", params={"genreId": "4"})
        genres = cells(response, "film-genre")
        assert len(genres) == 3
        assert set(genres) == {"Фантастика"}
        assert '<option value="4" selected>' in response.text

    def test_search_by_title(self, client):
        response = client.get("/Films", params={"searchString": "Інтерстеллар"})
        titles = cells(response, "film-title")
        assert titles == ["Інтерстеллар"]
        assert 'value="Інтерстеллар"' in page(response)

    def test_combined_filters(self, client):
        response = client.get("/Films", params={"searchString": "Дюна", "genreId": "1"})
        assert 'id="no-films-message"' in response.text
        assert 'id="films-table"' not in response.text

    def test_no_match_shows_empty_state(self, client):
        response = client.get("/Films", params={"searchString": "Неіснуючий"})
        assert response.status_code == 200
        assert 'id="no-films-message"' in response.text

    @pytest.mark.parametrize("genre_id", ["", "abc"])
    def test_invalid_genre_filter_ignored(self, client, genre_id):
        response = client.get("/Films", params={"genreId": genre_id})
        assert len(cells(response, "film-title")) == 5

    def test_empty_catalog(self, empty_client):
        response = empty_client.get("/Films")
        assert 'id="no-films-message"' in response.text

    @pytest.mark.parametrize(
        "message,text",
        [
            ("created", "Фільм успішно створено!"),
            ("updated", "Фільм успішно оновлено!"),
            ("deleted", "Фільм успішно видалено!"),
        ],
    )
    def test_success_alert(self, client, message, text):
        response = client.get("/Films", params={"message": message})
        assert 'id="success-alert"' in response.text
        assert text in page(response)

    def test_unknown_message_ignored(self, client):
        response = client.get("/Films", params={"message": "bogus"})
        assert 'id="success-alert"' not in response.text


class TestFilmDetails:
    def test_details(self, client):
        text = page(client.get("/Films/Details/1"))
        assert re.search(r'id="detail-title">Інтерстеллар<', text)
        assert re.search(r'id="detail-year">2014<', text)
        assert "Фантастика" in text
        assert "Крістофер Нолан" in text
        assert re.search(r'id="detail-rating">8.7<', text)
        assert 'id="detail-description"' in text

    def test_details_idempotent(self, client):
        assert client.get("/Films/Details/2").text == client.get("/Films/Details/2").text

    def test_unknown_id_returns_404(self, client):
        response = client.get("/Films/Details/999")
        assert response.status_code == 404
        assert "404" in response.text
        assert "Не знайдено" in response.text


class TestFilmCreate:
    def test_form(self, client):
        response = client.get("/Films/Create")
        assert response.status_code == 200
        for element_id in (
            "film-title",
            "film-year",
            "film-description",
            "film-rating",
            "film-genre",
            "film-director",
            "submit-btn",
        ):
            assert f'id="{element_id}"' in response.text
        assert "Драма" in response.text
        assert "Дені Вільньов" in response.text

    def test_create_redirects_with_message(self, client):
        response = client.post("/Films/Create", data=VALID_FORM, follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/Films?message=created"

    def test_created_film_listed(self, client):
        response = client.post("/Films/Create", data=VALID_FORM)
        assert response.status_code == 200
        assert "успішно" in page(response)
        assert "Тестовий фільм" in cells(response, "film-title")

    def test_year_below_range(self, client):
        response = client.post("/Films/Create", data={**VALID_FORM, "year": "1800"})
        assert response.status_code == 200
        text = page(response)
        assert re.search(r'data-valmsg-for="Year">[^<]*1895', text)
        assert 'value="Тестовий фільм"' in text

    def test_rating_above_range(self, client):
        response = client.post("/Films/Create", data={**VALID_FORM, "rating": "15"})
        assert re.search(r'data-valmsg-for="Rating">[^<]*10', page(response))

    def test_rating_with_comma(self, client):
        response = client.post(
            "/Films/Create", data={**VALID_FORM, "rating": "7,5"}, follow_redirects=False
        )
        assert response.status_code == 303

    def test_missing_fields(self, client):
        response = client.post("/Films/Create", data={"title": "", "year": ""})
        text = page(response)
        assert re.search(r'data-valmsg-for="Title">Назва є обов\'язковою', text)
        assert re.search(r'data-valmsg-for="Year">Рік випуску є обов\'язковим', text)
        assert re.search(r'data-valmsg-for="GenreId">Жанр є обов\'язковим', text)
        assert re.search(r'data-valmsg-for="DirectorId">Режисер є обов\'язковим', text)

    def test_unparseable_year(self, client):
        response = client.post("/Films/Create", data={**VALID_FORM, "year": "abc"})
        assert "Значення 'abc' некоректне" in page(response)

    def test_unknown_genre(self, client):
        response = client.post("/Films/Create", data={**VALID_FORM, "genre_id": "99"})
        assert re.search(r'data-valmsg-for="GenreId">Обраний жанр не існує', page(response))

    def test_invalid_submission_writes_nothing(self, client):
        client.post("/Films/Create", data={**VALID_FORM, "year": "1800"})
        assert "Тестовий фільм" not in cells(client.get("/Films"), "film-title")


class TestFilmEdit:
    def test_form_prefilled(self, client):
        text = page(client.get("/Films/Edit/1"))
        assert 'value="Інтерстеллар"' in text
        assert 'value="2014"' in text
        assert 'value="8.7"' in text
        assert '<option value="4" selected>Фантастика</option>' in text
        assert 'action="/Films/Edit/1"' in text

    def test_update(self, client):
        response = client.post(
            "/Films/Edit/5",
            data={**VALID_FORM, "title": "Дюна: Частина друга", "genre_id": "4", "director_id": "5"},
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/Films?message=updated"
        text = page(client.get("/Films/Details/5"))
        assert re.search(r'id="detail-title">Дюна: Частина друга<', text)

    def test_invalid_update_rerenders(self, client):
        response = client.post("/Films/Edit/1", data={**VALID_FORM, "rating": "0"})
        assert response.status_code == 200
        assert 'action="/Films/Edit/1"' in response.text
        assert 'data-valmsg-for="Rating">Рейтинг' in page(response)

    def test_unknown_id_returns_404(self, client):
        assert client.get("/Films/Edit/999").status_code == 404
        assert client.post("/Films/Edit/999", data=VALID_FORM).status_code == 404


class TestFilmDelete:
    def test_confirmation_page(self, client):
        response = client.get("/Films/Delete/3")
        assert response.status_code == 200
        assert 'id="confirm-delete-btn"' in response.text
        assert "Список Шіндлера" in page(response)

    def test_delete(self, client):
        response = client.post("/Films/Delete/3", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/Films?message=deleted"
        assert client.get("/Films/Details/3").status_code == 404

    def test_delete_twice_redirects_without_message(self, client):
        client.post("/Films/Delete/3")
        response = client.post("/Films/Delete/3", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/Films"

    def test_confirmation_unknown_id_returns_404(self, client):
        assert client.get("/Films/Delete/999").status_code == 404


class TestOversizedIdentifiers:
    """Un ID au-dela des entiers SQLite ne designe aucun film."""

    HUGE = "99999999999999999999"

    @pytest.mark.parametrize("path", ["/Films/Details/{}", "/Films/Edit/{}", "/Films/Delete/{}"])
    def test_get_returns_404(self, client, path):
        response = client.get(path.format(self.HUGE))
        assert response.status_code == 404
        assert "Не знайдено" in response.text

    def test_edit_post_returns_404(self, client):
        assert client.post(f"/Films/Edit/{self.HUGE}", data=VALID_FORM).status_code == 404

    def test_delete_post_redirects_to_list(self, client):
        response = client.post(f"/Films/Delete/{self.HUGE}", follow_redirects=False)
        assert response.headers["location"] == "/Films"

    def test_create_with_oversized_references(self, client):
        response = client.post(
            "/Films/Create",
            data={**VALID_FORM, "genre_id": self.HUGE, "director_id": "-" + self.HUGE},
        )
        assert response.status_code == 200
        text = page(response)
        assert re.search(r'data-valmsg-for="GenreId">Обраний жанр не існує', text)
        assert re.search(r'data-valmsg-for="DirectorId">Обраного режисера не існує', text)

    def test_genre_filter_matches_nothing(self, client):
        response = client.get("/Films", params={"genreId": self.HUGE})
        assert response.status_code == 200
        assert 'id="no-films-message"' in response.text
