import pytest

from aberth.__main__ import DEFAULT_SEED, families, main, run


class TestFamilies:
    def test_sweep_size(self):
        cases = list(families())
        assert len(cases) == 40

    def test_family_order(self):
        names = []
        for family, _, _ in families():
            if family not in names:
                names.append(family)
        assert names == ["Easy", "Exp", "kam1", "roots of unity"]

    def test_factories_bind_parameters(self):
        cases = list(families())
        _, label, make_coeffs = cases[0]
        assert label == "degree 10"
        assert make_coeffs().shape == (11,)
        _, label, make_coeffs = cases[9]
        assert label == "degree 100"
        assert make_coeffs().shape == (101,)


class TestMain:
    def test_all_pass(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert 'Testing "Easy" polynomials...' in out
        assert 'Testing "roots of unity" polynomials...' in out
        assert "All tests passed! :)" in out

    def test_failure_exit_status(self, capsys):
        with pytest.warns(UserWarning, match="Failed to converge"):
            status = main(["--maxiter", "1"])
        assert status == 1
        out = capsys.readouterr().out
        assert 'Failed "Easy" polynomial with degree 10' in out
        assert "All tests passed" not in out

    def test_run_default_seed(self):
        assert DEFAULT_SEED == 8008335
        assert run(seed=DEFAULT_SEED) is True

    def test_invalid_init_rejected(self):
        with pytest.raises(SystemExit):
            main(["--init", "rand"])
