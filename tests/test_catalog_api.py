"""
Products, categories, reviews and users endpoints.
"""
from fastapi.testclient import TestClient
from sqlmodel import select

from app.models.cart import CartItem
from app.models.review import Review

API = "/api/v1"


class TestProducts:
    def test_create_and_fetch(self, client: TestClient, make_category):
        category = make_category(name="Peripherals")

        response = client.post(f"{API}/products/", json={
            "name": "Keyboard",
            "category": "Peripherals",
            "price": 89.99,
            "stockCount": 12,
            "imageUrl": "https://cdn.example.com/kb.png",
            "categoryId": category.id,
        })

        assert response.status_code == 201
        created = response.json()
        assert created["stockCount"] == 12
        assert created["categoryId"] == category.id

        fetched = client.get(f"{API}/products/{created['id']}").json()
        assert fetched["name"] == "Keyboard"

    def test_create_requires_fields(self, client: TestClient):
        response = client.post(f"{API}/products/", json={"category": "X", "price": 1})
        assert response.status_code == 400
        assert response.json()["detail"] == "Name is required"

    def test_create_rejects_negative_price(self, client: TestClient):
        response = client.post(f"{API}/products/", json={"name": "A", "category": "X", "price": -5})
        assert response.status_code == 400

    def test_create_rejects_unknown_category(self, client: TestClient):
        response = client.post(f"{API}/products/", json={
            "name": "A", "category": "X", "price": 1, "categoryId": 99,
        })
        assert response.status_code == 404

    def test_list_filters_and_sorts(self, client: TestClient, make_product):
        make_product(name="Cheap", price=5)
        make_product(name="Pricey", price=500)
        make_product(name="Hidden", price=50, is_available=False)

        available = client.get(f"{API}/products/", params={"available": "true", "sort": "price_desc"}).json()

        assert [p["name"] for p in available] == ["Pricey", "Cheap"]

    def test_missing_product_is_404(self, client: TestClient):
        assert client.get(f"{API}/products/1234").status_code == 404

    def test_patch_single_attribute(self, client: TestClient, make_product):
        product = make_product(stock_count=1)

        response = client.patch(f"{API}/products/{product.id}", json={"attr": "stockCount", "value": 40})

        assert response.status_code == 200
        assert response.json()["stockCount"] == 40

    def test_patch_cannot_change_id(self, client: TestClient, make_product):
        product = make_product()
        response = client.patch(f"{API}/products/{product.id}", json={"attr": "id", "value": 9})
        assert response.status_code == 400

    def test_delete_removes_cart_lines(self, client: TestClient, session, make_user, make_product):
        user, product = make_user(), make_product()
        client.post(f"{API}/cart/{user.id}/items", json={"productId": product.id})

        response = client.delete(f"{API}/products/{product.id}")

        assert response.status_code == 200
        assert session.exec(select(CartItem)).all() == []
        assert client.delete(f"{API}/products/{product.id}").status_code == 404


class TestCategories:
    def test_create_and_list(self, client: TestClient):
        response = client.post(f"{API}/categories/", json={"name": "Displays", "description": "Monitors"})
        assert response.status_code == 201

        names = [c["name"] for c in client.get(f"{API}/categories/").json()]
        assert names == ["Displays"]

    def test_name_required_and_unique(self, client: TestClient, make_category):
        make_category(name="Laptops")
        assert client.post(f"{API}/categories/", json={"name": " "}).status_code == 400
        assert client.post(f"{API}/categories/", json={"name": "Laptops"}).status_code == 400

    def test_category_of_product(self, client: TestClient, make_category, make_product):
        category = make_category(name="Laptops")
        with_category = make_product(category_id=category.id)
        without_category = make_product()

        assert client.get(f"{API}/categories/product/{with_category.id}").json()["name"] == "Laptops"
        assert client.get(f"{API}/categories/product/{without_category.id}").status_code == 404


class TestReviews:
    def test_add_and_read(self, client: TestClient, make_user, make_product):
        user = make_user(username="reviewer")
        product = make_product(name="Mouse")

        response = client.post(f"{API}/reviews/", json={
            "productId": product.id, "userId": user.id, "rating": "4", "comment": "Solid",
        })

        assert response.status_code == 201
        review = response.json()
        assert review["rating"] == 4
        assert review["username"] == "reviewer"
        assert review["productName"] == "Mouse"

        assert client.get(f"{API}/reviews/{review['id']}").json()["comment"] == "Solid"
        assert len(client.get(f"{API}/reviews/product/{product.id}").json()) == 1
        assert len(client.get(f"{API}/reviews/").json()) == 1

    def test_rating_out_of_range(self, client: TestClient, make_user, make_product):
        response = client.post(f"{API}/reviews/", json={
            "productId": make_product().id, "userId": make_user().id, "rating": 6,
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "Rating must be between 1 and 5"

    def test_unknown_product(self, client: TestClient, make_user):
        response = client.post(f"{API}/reviews/", json={"productId": 50, "userId": make_user().id, "rating": 3})
        assert response.status_code == 404
        assert client.get(f"{API}/reviews/product/50").status_code == 404

    def test_delete(self, client: TestClient, make_user, make_product):
        created = client.post(f"{API}/reviews/", json={
            "productId": make_product().id, "userId": make_user().id, "rating": 5,
        }).json()

        assert client.delete(f"{API}/reviews/{created['id']}").status_code == 200
        assert client.get(f"{API}/reviews/{created['id']}").status_code == 404


class TestUsers:
    def test_create_hides_password(self, client: TestClient):
        response = client.post(f"{API}/users/", json={
            "username": "jdoe",
            "email": "jdoe@example.com",
            "password": "longenough",
            "firstName": "Jane",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "jdoe"
        assert body["firstName"] == "Jane"
        assert "passwordHash" not in body
        assert "password_hash" not in body

    def test_create_validation(self, client: TestClient, make_user):
        make_user(username="taken", email="taken@example.com")

        bad_email = {"username": "a", "email": "nope", "password": "longenough"}
        short_password = {"username": "a", "email": "a@example.com", "password": "short"}
        duplicate = {"username": "taken", "email": "other@example.com", "password": "longenough"}

        for payload in (bad_email, short_password, duplicate):
            assert client.post(f"{API}/users/", json=payload).status_code == 400

    def test_get_and_list(self, client: TestClient, make_user):
        user = make_user()
        assert client.get(f"{API}/users/{user.id}").json()["email"] == user.email
        assert len(client.get(f"{API}/users/").json()) == 1
        assert client.get(f"{API}/users/999").status_code == 404

    def test_delete_cascades(self, client: TestClient, session, make_user, make_product):
        user, product = make_user(), make_product()
        client.post(f"{API}/cart/{user.id}/items", json={"productId": product.id})
        client.post(f"{API}/reviews/", json={"productId": product.id, "userId": user.id, "rating": 2})

        assert client.delete(f"{API}/users/{user.id}").status_code == 200
        assert session.exec(select(CartItem)).all() == []
        assert session.exec(select(Review)).all() == []
        assert client.delete(f"{API}/users/{user.id}").status_code == 404

    def test_login(self, client: TestClient, make_user, password):
        user = make_user(username="alice", email="alice@example.com")

        by_name = client.post(f"{API}/users/login", json={"username": "alice", "password": password})
        by_email = client.post(f"{API}/users/login", json={"username": user.email, "password": password})
        wrong = client.post(f"{API}/users/login", json={"username": "alice", "password": "wrong-password"})
        missing = client.post(f"{API}/users/login", json={"username": "alice"})

        assert by_name.status_code == 200
        assert by_name.json() == {"message": "Login successful"}
        assert by_email.status_code == 200
        assert wrong.status_code == 401
        assert missing.status_code == 400
