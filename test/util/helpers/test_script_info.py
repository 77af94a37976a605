# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 clidecl Rui Pinheiro

import pytest

from clidecl.util.helpers import script_info
from clidecl.util.logging.manager import get_log_file_name


@pytest.mark.helpers
class TestScriptInfo:
    def test_is_unit_test(self):
        assert script_info.is_unit_test()

    def test_names_under_pytest(self):
        assert script_info.get_exe_name() == script_info.DEFAULT_EXE_NAME
        assert script_info.get_script_name() == "clidecl"
        assert get_log_file_name() == "clidecl.log"
