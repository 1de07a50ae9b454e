import unittest

from usuarios_app.core.filtering import FilteredView, coincide

from factories import make_user, sample_users


class TestCoincide(unittest.TestCase):
    def test_empty_query_matches_everyone(self):
        for usuario in sample_users():
            self.assertTrue(coincide(usuario, ""))

    def test_name_username_email_are_case_insensitive(self):
        usuario = make_user(1, "Leanne Graham", "Bret", "Sincere@april.biz")
        for consulta in ("leanne", "LEANNE", "gRaHaM", "bret", "BRET", "sincere@APRIL", "april.biz"):
            self.assertTrue(coincide(usuario, consulta), consulta)

    def test_id_matches_as_substring_of_decimal_string(self):
        siete = make_user(7, "Nombre", "alias", "x@example.com")
        self.assertTrue(coincide(siete, "7"))
        self.assertFalse(coincide(siete, "07"))

        diecisiete = make_user(17, "Nombre", "alias", "x@example.com")
        self.assertTrue(coincide(diecisiete, "7"))
        self.assertTrue(coincide(diecisiete, "17"))
        self.assertFalse(coincide(diecisiete, "71"))

    def test_no_field_matches(self):
        usuario = make_user(1, "Leanne Graham", "Bret", "Sincere@april.biz")
        self.assertFalse(coincide(usuario, "xyz"))

    def test_query_is_not_stripped(self):
        usuario = make_user(1, "Leanne Graham", "Bret", "Sincere@april.biz")
        self.assertFalse(coincide(usuario, " bret"))


class TestFilteredView(unittest.TestCase):
    def test_empty_query_is_identity(self):
        usuarios = sample_users()
        self.assertEqual(FilteredView(usuarios, "").a_lista(), list(usuarios))

    def test_result_is_ordered_subset_satisfying_predicate(self):
        usuarios = sample_users()
        for consulta in ("e", "1", "biz", "A", "zzz", "7"):
            resultado = FilteredView(usuarios, consulta).a_lista()
            self.assertEqual(resultado, [u for u in usuarios if u in resultado])
            for usuario in resultado:
                self.assertTrue(coincide(usuario, consulta))
            for usuario in usuarios:
                if usuario not in resultado:
                    self.assertFalse(coincide(usuario, consulta))

    def test_view_is_restartable(self):
        vista = FilteredView(sample_users(), "biz")
        primera = list(vista)
        segunda = list(vista)
        self.assertEqual(primera, segunda)
        self.assertEqual(len(vista), 3)
        self.assertTrue(vista)

    def test_empty_result_is_falsy(self):
        vista = FilteredView(sample_users(), "xyz")
        self.assertFalse(vista)
        self.assertEqual(len(vista), 0)
        self.assertEqual(vista.a_lista(), [])

    def test_leanne_scenario(self):
        leanne = make_user(1, "Leanne Graham", "Bret", "Sincere@april.biz", "-37.3159", "81.1496")
        self.assertEqual(FilteredView((leanne,), "bret").a_lista(), [leanne])
        self.assertEqual(FilteredView((leanne,), "xyz").a_lista(), [])


if __name__ == "__main__":
    unittest.main()
