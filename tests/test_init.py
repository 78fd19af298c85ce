# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import importlib
import pytest
import alignedit


def test_version_number():
    assert hasattr(alignedit, "__version__")


@pytest.mark.parametrize(
    "module_name",
    [
        "alignedit.alignment.error",
        "alignedit.alignment.annotation",
        "alignedit.alignment.sequence",
        "alignedit.alignment.alignment",
        "alignedit.structure.error",
        "alignedit.structure.pairs",
        "alignedit.structure.cache",
        "alignedit.editor.history",
        "alignedit.editor.session",
    ],
)
def test_public_names(module_name):
    """
    Check that all public names of a module are available from its
    subpackage.
    """
    module = importlib.import_module(module_name)
    package = importlib.import_module(module.__name__)
    for name in module.__all__:
        assert getattr(package, name) is getattr(module, name)
