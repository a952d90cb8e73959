from __future__ import annotations

import unittest


class TestPublicApiLockContract(unittest.TestCase):
    def test_api_module_exports_are_present(self) -> None:
        import terminder.api as api

        self.assertIsInstance(api.__all__, list)
        for name in api.__all__:
            self.assertTrue(hasattr(api, name), f"terminder.api missing public name: {name}")
            self.assertIsNotNone(getattr(api, name))

    def test_package_reexports_match_api_all(self) -> None:
        import terminder
        import terminder.api as api

        for name in api.__all__:
            self.assertIs(getattr(terminder, name), getattr(api, name), f"terminder.{name} must be terminder.api.{name}")

    def test_public_exports_are_sorted_and_complete(self) -> None:
        import terminder.api as api

        self.assertEqual(len(set(api._PUBLIC_EXPORTS)), len(api._PUBLIC_EXPORTS))
        self.assertEqual(list(api._PUBLIC_EXPORTS), sorted(api._PUBLIC_EXPORTS))
        self.assertEqual(api.__all__, list(api._PUBLIC_EXPORTS))

    def test_core_modules_carry_docstrings(self) -> None:
        import terminder.storage as storage
        import terminder.store as store

        for mod in (store, storage):
            self.assertTrue((mod.__doc__ or "").strip(), f"{mod.__name__} has no module docstring")


if __name__ == "__main__":
    unittest.main(verbosity=2)
