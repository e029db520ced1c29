from resources import shopt_options as res_mod


def test_options_reference_lists_toggles_and_aliases():
    text = res_mod.options_reference()
    for name in ("dotglob", "extglob", "failglob", "globstar", "nocaseglob", "nullglob"):
        assert name in text
    assert "nocasematch" in text
    assert "alias for dotglob" in text


def test_register_resources(dummy_mcp):
    res_mod.register_resources(dummy_mcp)
    fn = dummy_mcp.resources["bash-match://options"]
    assert fn() == res_mod.options_reference()
