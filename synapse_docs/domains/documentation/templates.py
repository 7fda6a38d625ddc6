"""HTML templates for the documentation site.

Templates use the flat renderer syntax: ``{{name}}``, ``{% if name %}`` and
``{% for item in items %}`` with ``{{item.field}}``. Loops cannot nest, so
nested lists (tutorial steps, package classes) are rendered into fragments
before the outer template runs.
"""

STYLE = """
    <style>
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; padding: 0; background: #f8fafc; color: #2d3748; }
        .container { max-width: 1100px; margin: 0 auto; padding: 40px 20px; }
        .header { text-align: center; margin-bottom: 40px; }
        .header p { color: #718096; }
        .grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 24px; }
        .card, .content { background: white; padding: 30px; border-radius: 12px; box-shadow: 0 4px 6px rgba(0,0,0,0.1); margin-bottom: 24px; }
        .meta span { background: #e2e8f0; padding: 4px 8px; border-radius: 4px; font-size: 0.9em; margin-right: 8px; }
        pre { background: #f7fafc; padding: 20px; border-radius: 8px; overflow-x: auto; }
        a { color: #667eea; text-decoration: none; font-weight: 600; }
        a:hover { text-decoration: underline; }
        .back-link { display: inline-block; margin-bottom: 20px; }
        .steps li.done { color: #a0aec0; }
        .steps li.current { font-weight: 700; }
    </style>"""

HOME = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{title}}</title>
    <meta name="description" content="{{description}}">""" + STYLE + """
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Synapse Framework</h1>
            <p>{{description}}</p>
            <p><a href="/getting-started">Start the wizard</a> &middot; <a href="/examples">Examples</a> &middot; <a href="/tutorials">Tutorials</a> &middot; <a href="/patterns">Patterns</a> &middot; <a href="/api">API</a></p>
        </div>
        <div class="grid">
            {% for page in pages %}
            <div class="card">
                <h3>{{page.title}}</h3>
                <p>{{page.summary}}</p>
                <a href="/{{page.slug}}">Read More &rarr;</a>
            </div>
            {% endfor %}
        </div>
        {% if core_packages %}
        <h2>Core Packages</h2>
        <div class="grid">
            {% for pkg in core_packages %}
            <div class="card"><h3><a href="/packages/{{pkg.short_name}}">{{pkg.name}}</a></h3><p>{{pkg.description}}</p></div>
            {% endfor %}
        </div>
        {% endif %}
        {% if enterprise_packages %}
        <h2>Enterprise Packages</h2>
        <div class="grid">
            {% for pkg in enterprise_packages %}
            <div class="card"><h3><a href="/packages/{{pkg.short_name}}">{{pkg.name}}</a></h3><p>{{pkg.description}}</p></div>
            {% endfor %}
        </div>
        {% endif %}
        {% if nextgen_packages %}
        <h2>Next-Generation Packages</h2>
        <div class="grid">
            {% for pkg in nextgen_packages %}
            <div class="card"><h3><a href="/packages/{{pkg.short_name}}">{{pkg.name}}</a></h3><p>{{pkg.description}}</p></div>
            {% endfor %}
        </div>
        {% endif %}
        {% if futuristic_packages %}
        <h2>Futuristic Packages</h2>
        <div class="grid">
            {% for pkg in futuristic_packages %}
            <div class="card"><h3><a href="/packages/{{pkg.short_name}}">{{pkg.name}}</a></h3><p>{{pkg.description}}</p></div>
            {% endfor %}
        </div>
        {% endif %}
    </div>
</body>
</html>"""

PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{title}} - Synapse Framework</title>""" + STYLE + """
</head>
<body>
    <div class="container">
        <a href="/" class="back-link">&larr; Back to Documentation</a>
        <div class="content">
            <div class="meta"><span>{{category}}</span><span>{{views}} views</span><span id="likes">{{likes}} likes</span><span>{{author}}</span></div>
            {{content_html|raw}}
            <p class="meta">{% for tag in tags %}<span>#{{tag.name}}</span>{% endfor %}</p>
            <button onclick="fetch('/{{slug}}/like', {method: 'POST'}).then(r => r.json()).then(d => document.getElementById('likes').textContent = d.likes + ' likes')">Like</button>
        </div>
    </div>
</body>
</html>"""

PACKAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{title}}</title>""" + STYLE + """
</head>
<body>
    <div class="container">
        <a href="/" class="back-link">&larr; Back to Documentation</a>
        <div class="content">
            <h1>{{name}}</h1>
            <div class="meta"><span>v{{version}}</span><span>{{category}}</span></div>
            <p>{{description}}</p>
            <pre><code>npm install {{name}}</code></pre>
            <h2>Classes</h2>
            {% for cls in classes %}
            <div class="card">
                <h3>{{cls.name}}</h3>
                <p>{{cls.description}}</p>
                <p class="meta"><span>{{cls.method_list}}</span></p>
            </div>
            {% endfor %}
            <h2>Design Patterns</h2>
            <ul>{% for pattern in patterns %}<li>{{pattern.name}}</li>{% endfor %}</ul>
        </div>
    </div>
</body>
</html>"""

EXAMPLES = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{title}} - Synapse Framework</title>""" + STYLE + """
</head>
<body>
    <div class="container">
        <a href="/" class="back-link">&larr; Back to Documentation</a>
        <div class="header">
            <h1>{{title}}</h1>
            <p>{{description}}</p>
        </div>
        {% for example in examples %}
        <div class="card">
            <h3>{{example.title}}</h3>
            <p>{{example.description}}</p>
            <div class="meta">
                <span>{{example.language}}</span>
                <span>{{example.category}}</span>
                <span>{{example.package}}</span>
            </div>
            <pre><code>{{example.code}}</code></pre>
        </div>
        {% endfor %}
    </div>
</body>
</html>"""

TUTORIAL_STEP = """
            <li>
                <h4>{{title}}</h4>
                <p>{{content}}</p>
                {% if is_optional %}<p class="meta"><span>optional</span></p>{% endif %}
                {% if code %}<pre><code>{{code}}</code></pre>{% endif %}
            </li>"""

TUTORIALS = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{title}} - Synapse Framework</title>""" + STYLE + """
</head>
<body>
    <div class="container">
        <a href="/" class="back-link">&larr; Back to Documentation</a>
        <div class="header">
            <h1>{{title}}</h1>
            <p>{{description}}</p>
        </div>
        {% for tutorial in tutorials %}
        <div class="card">
            <h2>{{tutorial.title}}</h2>
            <p>{{tutorial.description}}</p>
            <div class="meta">
                <span>{{tutorial.difficulty}}</span>
                <span>{{tutorial.estimated_time}} min</span>
                <span>Requires: {{tutorial.prerequisite_list}}</span>
            </div>
            <ol>{{tutorial.steps_html|raw}}
            </ol>
        </div>
        {% endfor %}
    </div>
</body>
</html>"""

PATTERNS = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{title}}</title>""" + STYLE + """
</head>
<body>
    <div class="container">
        <a href="/" class="back-link">&larr; Back to Documentation</a>
        <div class="header">
            <h1>Design Patterns</h1>
            <p>{{description}}</p>
        </div>
        <div class="grid">
            {% for pattern in patterns %}
            <div class="card">
                <h3>{{pattern.name}}</h3>
                <p>Used by {{pattern.package_list}}</p>
            </div>
            {% endfor %}
        </div>
    </div>
</body>
</html>"""

API = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{title}}</title>""" + STYLE + """
</head>
<body>
    <div class="container">
        <a href="/" class="back-link">&larr; Back to Documentation</a>
        <div class="header">
            <h1>API Reference</h1>
            <p>{{description}}</p>
        </div>
        <div class="content">
            {% for pkg in packages %}
            <h3><a href="/packages/{{pkg.short_name}}">{{pkg.name}}</a> <small>v{{pkg.version}}</small></h3>
            <p>{{pkg.description}}</p>
            <p class="meta"><span>{{pkg.category}}</span><span>{{pkg.class_list}}</span></p>
            {% endfor %}
        </div>
    </div>
</body>
</html>"""

WIZARD = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{title}}</title>""" + STYLE + """
</head>
<body>
    <div class="container">
        <a href="/" class="back-link">&larr; Back to Documentation</a>
        <div class="header">
            <h1>{{wizard_title}}</h1>
            <p>{{wizard_description}}</p>
        </div>
        <div class="content">
            <progress value="{{progress}}" max="100"></progress>
            <span>Step {{step_number}} of {{total_steps}}</span>
            <ol class="steps">{% for step in steps %}<li class="{{step.state}}">{{step.title}}</li>{% endfor %}</ol>
            <h2>{{step_title}}</h2>
            <div class="meta"><span>{{step_type}}</span>{% if is_optional %}<span>optional</span>{% endif %}</div>
            <p>{{step_description}}</p>
            <p>{{step_content}}</p>
            {% if code_example %}<pre><code>{{code_example}}</code></pre>{% endif %}
            {% if has_previous %}<button data-action="previous">Previous</button>{% endif %}
            {% if has_next %}<button data-action="next">Next</button>{% endif %}
            {% if is_last %}<button data-action="reset">Start over</button>{% endif %}
            <p class="meta">{% for pref in preferences %}<span>{{pref.name}}: {{pref.value}}</span>{% endfor %}</p>
        </div>
    </div>
    <script>
        document.querySelectorAll('button[data-action]').forEach(function (button) {
            button.addEventListener('click', function () {
                fetch('/getting-started/' + button.dataset.action, {method: 'POST'}).then(function () { location.reload(); });
            });
        });
    </script>
</body>
</html>"""

NOT_FOUND = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Page Not Found - Synapse Framework</title>""" + STYLE + """
</head>
<body>
    <div class="container header">
        <h1>404</h1>
        <p>Page "{{path}}" not found</p>
        <a href="/">&larr; Back to Documentation</a>
    </div>
</body>
</html>"""

TEMPLATES = {
    "home": HOME,
    "page": PAGE,
    "package": PACKAGE,
    "examples": EXAMPLES,
    "tutorial_step": TUTORIAL_STEP,
    "tutorials": TUTORIALS,
    "patterns": PATTERNS,
    "api": API,
    "wizard": WIZARD,
    "not_found": NOT_FOUND,
}
