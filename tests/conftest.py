import logfire
import pytest

from objcraft import css_selector_builder


def pytest_configure(config):
    """Register custom markers and keep logfire local."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')
    logfire.configure(send_to_logfire=False, console=False)


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        if hasattr(item, 'fspath'):
            file_path = str(item.fspath)

            if '/tests/integration/' in file_path:
                item.add_marker(pytest.mark.integration)
            elif '/tests/unit/' in file_path:
                item.add_marker(pytest.mark.unit)


@pytest.fixture
def builder():
    return css_selector_builder


@pytest.fixture
def page_html():
    return """
    <!DOCTYPE html>
    <html>
    <body>
        <div id="main" class="container editable draggable">
            <a href="/files/photo.png">Photo</a>
            <a href="/files/notes.txt">Notes</a>
        </div>
        <table id="data">
            <tr><td>r1c1</td><td>r1c2</td></tr>
            <tr><td>r2c1</td><td>r2c2</td></tr>
        </table>
        <ul class="menu">
            <li class="item active">One</li>
            <li class="item">Two</li>
        </ul>
    </body>
    </html>
    """
