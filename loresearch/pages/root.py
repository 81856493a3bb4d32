"""Root search page: query box, options, and result rendering.

The page talks to GET /api/v1/search and renders results client-side.
Labels and highlight markers are injected as JSON config; matched values
are HTML-escaped before markers are turned into <mark> elements.
"""

import html
import json

from loresearch.pages.labels import FIELD_LABELS, RELEVANCE_LABEL_TEXT

_STYLE = """
        * { box-sizing: border-box; }
        body {
            font-family: system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #000;
            color: #e0e0e0;
            padding: 2rem 1rem;
        }
        .wrap { max-width: 760px; margin: 0 auto; }
        .hero { text-align: center; margin-bottom: 2rem; }
        .hero h1 { font-size: 2.25rem; font-weight: 600; margin: 0 0 0.5rem 0; color: #fff; }
        .hero .tagline { color: #888; margin: 0; }
        .card {
            background: #0c0c0c;
            border: 1px solid #1a1a1a;
            padding: 1.25rem 1.5rem;
            margin-bottom: 1rem;
        }
        .search-row { display: flex; gap: 0.5rem; }
        .search-row input {
            flex: 1;
            padding: 0.6rem 0.8rem;
            background: #111;
            color: #e0e0e0;
            border: 1px solid #333;
            font-size: 1rem;
        }
        button {
            padding: 0.6rem 1.1rem;
            background: #222;
            color: #e0e0e0;
            border: 1px solid #333;
            cursor: pointer;
        }
        button.primary { background: #fff; color: #000; border-color: #fff; }
        .options { display: flex; flex-wrap: wrap; gap: 1rem; margin-top: 0.9rem; color: #999; }
        .result h3 { margin: 0 0 0.75rem 0; color: #fff; }
        .field { margin-bottom: 0.5rem; line-height: 1.5; }
        .label { color: #777; }
        .nested { margin: 0.35rem 0 0 1.25rem; }
        .muted { color: #666; font-size: 0.8rem; margin-top: 0.5rem; }
        .badge { font-size: 0.75rem; padding: 0.15rem 0.5rem; margin-left: 0.5rem; }
        .badge.high { background: #123d1f; color: #8fe0a6; }
        .badge.medium { background: #3d3512; color: #e0cf8f; }
        .error { border-color: #5a1a1a; color: #f0a0a0; }
        mark { background: #f5d76e; color: #000; padding: 0 0.1rem; }
"""

_SCRIPT = """
(function () {
    var config = window.LORESEARCH_CONFIG;
    var input = document.getElementById('search-input');
    var options = {
        caseSensitive: document.getElementById('case-sensitive'),
        wholeWords: document.getElementById('whole-words'),
        fuzzy: document.getElementById('fuzzy-search'),
        sortByRelevance: document.getElementById('relevance-sort')
    };
    var states = ['status-message', 'loading-indicator', 'results-container', 'no-results', 'error-message'];
    var idleMessage = 'Enter an entity name or keyword to search';

    function hideAll() {
        states.forEach(function (id) { document.getElementById(id).hidden = true; });
    }

    function show(id) {
        hideAll();
        document.getElementById(id).hidden = false;
    }

    function showStatus(message) {
        document.querySelector('#status-message span').textContent = message;
        show('status-message');
    }

    function escapeHtml(value) {
        return String(value)
            .replace(/&/g, '&amp;')
            .replace(/</g, '&lt;')
            .replace(/>/g, '&gt;')
            .replace(/"/g, '&quot;');
    }

    function renderValue(value) {
        return escapeHtml(value)
            .split(escapeHtml(config.markers.start)).join('<mark>')
            .split(escapeHtml(config.markers.end)).join('</mark>');
    }

    function label(key) {
        return Object.prototype.hasOwnProperty.call(config.labels, key) ? config.labels[key] : key;
    }

    function renderInfo(info) {
        var html = '';
        Object.keys(info).forEach(function (key) {
            var value = info[key];
            html += '<div class="field"><span class="label">' + escapeHtml(label(key)) + ':</span> ';
            if (value !== null && typeof value === 'object') {
                html += '<div class="nested">' + renderInfo(value) + '</div>';
            } else {
                html += renderValue(value);
            }
            html += '</div>';
        });
        return html;
    }

    function renderResults(results) {
        var list = document.getElementById('results-list');
        document.getElementById('results-count').textContent = results.length;
        list.innerHTML = '';
        results.forEach(function (result) {
            var item = document.createElement('div');
            var badge = '';
            if (result.relevanceLabel) {
                badge = '<span class="badge ' + result.relevanceLabel + '">' +
                    escapeHtml(config.relevanceText[result.relevanceLabel]) + '</span>';
            }
            var html = '<h3>' + escapeHtml(result.entity) + badge + '</h3>' + renderInfo(result.info);
            if (result.matchCount > 1) {
                html += '<div class="muted">' + result.matchCount + ' matching values</div>';
            }
            item.className = 'card result';
            item.innerHTML = html;
            list.appendChild(item);
        });
    }

    function performSearch() {
        var query = input.value.trim();
        if (!query) {
            showStatus(idleMessage);
            return;
        }
        show('loading-indicator');
        var params = new URLSearchParams({ query: query });
        Object.keys(options).forEach(function (name) {
            params.set(name, options[name].checked ? 'true' : 'false');
        });
        fetch(config.searchUrl + '?' + params.toString())
            .then(function (response) {
                return response.json().then(function (data) {
                    if (!response.ok || !data.success) {
                        throw new Error(data.error || 'Search failed; check that the store is available');
                    }
                    return data;
                });
            })
            .then(function (data) {
                if (data.results.length > 0) {
                    renderResults(data.results);
                    show('results-container');
                } else {
                    show('no-results');
                }
            })
            .catch(function (error) {
                document.getElementById('error-text').textContent = 'Error: ' + error.message;
                show('error-message');
            });
    }

    function clearResults() {
        input.value = '';
        document.getElementById('results-list').innerHTML = '';
        showStatus(idleMessage);
        input.focus();
    }

    document.getElementById('search-btn').addEventListener('click', performSearch);
    document.getElementById('clear-btn').addEventListener('click', clearResults);
    input.addEventListener('keypress', function (e) {
        if (e.key === 'Enter') performSearch();
    });
    Object.keys(options).forEach(function (name) {
        options[name].addEventListener('change', function () {
            if (input.value.trim()) performSearch();
        });
    });
    input.focus();
})();
"""


def _page_config(search_url: str, start_marker: str, end_marker: str) -> str:
    """JSON config for the page script, safe to embed inside <script>."""
    config = {
        "searchUrl": search_url,
        "markers": {"start": start_marker, "end": end_marker},
        "labels": FIELD_LABELS,
        "relevanceText": RELEVANCE_LABEL_TEXT,
    }
    return json.dumps(config).replace("</", "<\\/")


def render_root_page(
    app_name: str,
    search_url: str = "/api/v1/search",
    start_marker: str = "<mark>",
    end_marker: str = "</mark>",
) -> str:
    """Return HTML for the root search page."""
    config_json = _page_config(search_url, start_marker, end_marker)
    app_name = html.escape(app_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{app_name}</title>
    <style>{_STYLE}</style>
</head>
<body>
    <div class="wrap">
        <header class="hero">
            <h1>{app_name}</h1>
            <p class="tagline">Keyword search across every entity in the store.</p>
        </header>

        <section class="card" aria-label="Search">
            <div class="search-row">
                <input id="search-input" type="search" placeholder="Entity name or keyword" autocomplete="off">
                <button id="search-btn" class="primary" type="button">Search</button>
                <button id="clear-btn" type="button">Clear</button>
            </div>
            <div class="options">
                <label><input id="case-sensitive" type="checkbox"> Case sensitive</label>
                <label><input id="whole-words" type="checkbox"> Whole words</label>
                <label><input id="fuzzy-search" type="checkbox"> Fuzzy</label>
                <label><input id="relevance-sort" type="checkbox"> Sort by relevance</label>
            </div>
        </section>

        <div id="status-message" class="card"><span>Enter an entity name or keyword to search</span></div>
        <div id="loading-indicator" class="card" hidden>Searching…</div>
        <div id="no-results" class="card" hidden>No matching entities.</div>
        <div id="error-message" class="card error" hidden><span id="error-text"></span></div>
        <section id="results-container" hidden>
            <p class="muted"><span id="results-count">0</span> matching entities</p>
            <div id="results-list"></div>
        </section>
    </div>
    <script>window.LORESEARCH_CONFIG = {config_json};</script>
    <script>{_SCRIPT}</script>
</body>
</html>
""".strip()
