import unittest

from pinestore.infrastructure import routes
from pinestore.infrastructure.routes import ROUTES, Operation


class TestRouteRegistry(unittest.TestCase):
    def test_every_operation_is_registered(self) -> None:
        self.assertEqual(set(ROUTES), set(Operation))
        for operation, route in ROUTES.items():
            self.assertEqual(route.operation, operation)
            self.assertEqual(route.method, "GET")

    def test_registry_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            ROUTES[Operation.FETCH_PROJECT] = routes.FETCH_USER

    def test_paths(self) -> None:
        self.assertEqual(routes.FETCH_PROJECT.url(135), "/api/projects/135")
        self.assertEqual(routes.FETCH_COMMENTS.url(135), "/api/projects/135/comments")
        self.assertEqual(routes.FETCH_CHANGELOG.url(135), "/api/projects/135/changelog")
        self.assertEqual(routes.FETCH_CHANGELOGS.url(135), "/api/projects/135/changelogs")
        self.assertEqual(routes.FETCH_PROJECTS.url(), "/api/projects")
        self.assertEqual(routes.SEARCH_PROJECTS.url("zood"), "/api/projects/search?q=zood")
        self.assertEqual(routes.FETCH_PROJECT_BY_NAME.url("Zood"), "/api/projects/named/?name=Zood")
        self.assertEqual(routes.FETCH_USER.url("258711360236421131"), "/api/users/258711360236421131")
        self.assertEqual(
            routes.FETCH_USER_PROJECTS.url("258711360236421131"),
            "/api/users/258711360236421131/projects",
        )


class TestQueryEncoding(unittest.TestCase):
    def test_space_is_percent_encoded(self) -> None:
        self.assertEqual(routes.SEARCH_PROJECTS.url("a b"), "/api/projects/search?q=a%20b")

    def test_reserved_characters_are_escaped(self) -> None:
        self.assertEqual(
            routes.SEARCH_PROJECTS.url("a&b?c/d"),
            "/api/projects/search?q=a%26b%3Fc%2Fd",
        )

    def test_unicode_is_utf8_encoded(self) -> None:
        self.assertEqual(
            routes.FETCH_PROJECT_BY_NAME.url("café"),
            "/api/projects/named/?name=caf%C3%A9",
        )

    def test_unreserved_marks_are_kept(self) -> None:
        self.assertEqual(routes.encode_component("a-b_c.d!e~f*g'h(i)"), "a-b_c.d!e~f*g'h(i)")


class TestArrayTransforms(unittest.TestCase):
    def test_empty_arrays_become_empty_lists(self) -> None:
        array_routes = [
            routes.FETCH_COMMENTS,
            routes.FETCH_CHANGELOGS,
            routes.FETCH_PROJECTS,
            routes.SEARCH_PROJECTS,
            routes.FETCH_USER_PROJECTS,
        ]
        for route in array_routes:
            with self.subTest(operation=route.operation):
                self.assertEqual(route.transform([]), [])
