"""Literal documentation content seeded into the record store at startup."""

PAGES = [
    {
        "title": "Getting Started",
        "slug": "getting-started-guide",
        "category": "getting-started",
        "order": 1,
        "tags": ["introduction", "setup", "quick-start"],
        "content": """# Getting Started with Synapse

Welcome to the Synapse framework, a TypeScript framework built with zero dependencies.

## Quick Start

### 1. Install Synapse

```bash
npm install @synapse/core @synapse/routing @synapse/database
```

### 2. Create Your First App

```typescript
import { Server } from '@synapse/core';
import { Router } from '@synapse/routing';

const server = new Server({ port: 3000 });
const router = new Router();

router.get('/', (req, res) => {
  res.writeHead(200, { 'Content-Type': 'text/html' });
  res.end('<h1>Hello Synapse!</h1>');
});

server.useRouter(router);
await server.start();
```

### 3. Run Your App

```bash
npx tsx app.ts
```

## Next Steps

- Explore the [Core Framework](/core) documentation
- Browse [Code Examples](/examples) for practical implementations
""",
    },
    {
        "title": "Core Framework",
        "slug": "core",
        "category": "core",
        "order": 2,
        "tags": ["server", "routing", "database", "auth", "templating", "testing"],
        "content": """# Core Framework

The core packages provide the HTTP server, routing, database, authentication,
templating and testing capabilities every application needs.

## Packages

- **@synapse/core**: HTTP server, middleware, caching and logging.
- **@synapse/routing**: path matching, parameters and route grouping.
- **@synapse/database**: in-memory database with a Model class and QueryBuilder.
- **@synapse/auth**: JWT, sessions, password hashing and OAuth2.
- **@synapse/templating**: variable substitution, conditionals, loops and escaping.
- **@synapse/testing**: test runner, mocks, spies and stubs.
""",
    },
    {
        "title": "Enterprise Features",
        "slug": "enterprise",
        "category": "enterprise",
        "order": 3,
        "tags": ["graphql", "microservices", "api-docs", "email", "notifications"],
        "content": """# Enterprise Features

GraphQL, microservices, API documentation, file upload, email and
notifications for production applications.
""",
    },
    {
        "title": "Next-Generation Features",
        "slug": "nextgen",
        "category": "nextgen",
        "order": 4,
        "tags": ["ai", "blockchain", "collaboration", "workflow"],
        "content": """# Next-Generation Features

AI integration, blockchain support, real-time collaboration and workflow
automation.
""",
    },
    {
        "title": "Futuristic Features",
        "slug": "futuristic",
        "category": "futuristic",
        "order": 5,
        "tags": ["pwa", "voice", "webassembly", "webrtc"],
        "content": """# Futuristic Features

Progressive Web Apps, voice interfaces, WebAssembly and WebRTC.
""",
    },
    {
        "title": "API Reference",
        "slug": "api-reference",
        "category": "api",
        "order": 6,
        "tags": ["api", "reference", "endpoints", "types"],
        "content": """# API Reference

Type definitions, method signatures and usage notes for every package.
See the [full reference](/api).
""",
    },
    {
        "title": "Examples & Tutorials",
        "slug": "examples-and-tutorials",
        "category": "examples",
        "order": 7,
        "tags": ["examples", "tutorials", "guides", "code"],
        "content": """# Examples & Tutorials

Practical examples and step-by-step tutorials. Browse the
[examples](/examples) and [tutorials](/tutorials).
""",
    },
]

EXAMPLES = [
    {
        "title": "Basic Server Setup",
        "description": "Create a simple HTTP server with Synapse",
        "language": "typescript",
        "category": "Core",
        "package": "@synapse/core",
        "is_interactive": True,
        "is_runnable": True,
        "dependencies": ["@synapse/core", "@synapse/routing"],
        "code": """import { Server } from '@synapse/core';
import { Router } from '@synapse/routing';

const server = new Server({ port: 3000 });
const router = new Router();

router.get('/', (req, res) => {
  res.writeHead(200, { 'Content-Type': 'text/html' });
  res.end('<h1>Hello from Synapse!</h1>');
});

server.useRouter(router);
await server.start();""",
    },
    {
        "title": "Database Models",
        "description": "Define a model and persist records with the in-memory database",
        "language": "typescript",
        "category": "Database",
        "package": "@synapse/database",
        "is_interactive": True,
        "is_runnable": True,
        "dependencies": ["@synapse/database"],
        "code": """import { Database, Model } from '@synapse/database';

class User extends Model {
  static tableName = 'users';
  name: string = '';
  email: string = '';
}

const db = new Database();
await db.connect();
User.setDatabase(db);

const user = new User();
user.name = 'John Doe';
await user.save();""",
    },
    {
        "title": "AI Integration with Web AI",
        "description": "Use browser-based AI generation",
        "language": "typescript",
        "category": "AI",
        "package": "@synapse/ai",
        "is_interactive": False,
        "is_runnable": True,
        "dependencies": ["@synapse/ai"],
        "code": """import { AIService } from '@synapse/ai';

const ai = new AIService({ webAI: { enableBrowserAI: true } });
const response = await ai.generateText('Write a story about a robot', 'gemini-pro');
console.log(response.content);""",
    },
]

TUTORIALS = [
    {
        "title": "Build a REST API",
        "description": "Create a small JSON API with routing and a database model",
        "difficulty": "beginner",
        "estimated_time": 20,
        "prerequisites": ["Node.js 18+", "Basic TypeScript"],
        "category": "Core",
        "steps": [
            {
                "title": "Create the server",
                "content": "Start a server and attach a router.",
                "code": "const server = new Server({ port: 3000 });",
                "language": "typescript",
            },
            {
                "title": "Add a route",
                "content": "Return JSON from a GET route.",
                "code": "router.get('/api/users', async (req, res) => { /* ... */ });",
                "language": "typescript",
            },
            {
                "title": "Add request logging",
                "content": "Optionally log every request with middleware.",
                "is_optional": True,
            },
        ],
    },
]

PACKAGES = [
    {
        "name": "@synapse/core",
        "description": "HTTP server with middleware support, caching, performance monitoring and logging.",
        "category": "core",
        "classes": [
            {"name": "Server", "description": "Main HTTP server class with middleware support", "methods": ["start", "stop", "use", "useRouter"]},
        ],
        "design_patterns": ["Facade", "Chain of Responsibility", "Observer"],
    },
    {
        "name": "@synapse/routing",
        "description": "Routing with path matching, parameters, middleware support and route grouping.",
        "category": "core",
        "classes": [
            {"name": "Router", "description": "Main router class for handling HTTP routes", "methods": ["get", "post", "put", "delete", "use"]},
        ],
        "design_patterns": ["Chain of Responsibility", "Strategy"],
    },
    {
        "name": "@synapse/database",
        "description": "In-memory database with ORM capabilities, QueryBuilder and Model class.",
        "category": "core",
        "classes": [
            {"name": "Database", "description": "Main database class for data persistence", "methods": ["connect", "createTable", "insert", "find"]},
            {"name": "Model", "description": "Base class for ORM models", "methods": ["save", "delete", "find"]},
        ],
        "design_patterns": ["Active Record", "Repository", "Builder"],
    },
    {
        "name": "@synapse/templating",
        "description": "Template engine with variable substitution, conditional blocks, loops and HTML escaping.",
        "category": "core",
        "classes": [
            {"name": "TemplateEngine", "description": "Renders templates against a data context", "methods": ["render", "compile"]},
        ],
        "design_patterns": ["Interpreter", "Strategy"],
    },
    {
        "name": "@synapse/graphql",
        "description": "GraphQL schema generation, resolvers, introspection and playground.",
        "category": "enterprise",
        "classes": [
            {"name": "GraphQLServer", "description": "Serves a GraphQL schema over HTTP", "methods": ["addType", "addResolver"]},
        ],
        "design_patterns": ["Builder", "Visitor"],
    },
    {
        "name": "@synapse/microservices",
        "description": "Service discovery, load balancing, circuit breakers and health checks.",
        "category": "enterprise",
        "classes": [
            {"name": "ServiceRegistry", "description": "Registers and discovers services", "methods": ["register", "discover"]},
        ],
        "design_patterns": ["Circuit Breaker", "Service Locator"],
    },
    {
        "name": "@synapse/ai",
        "description": "AI integration with text generation, embeddings and model management.",
        "category": "nextgen",
        "classes": [
            {"name": "AIService", "description": "Unified client for AI providers", "methods": ["generateText", "embed"]},
        ],
        "design_patterns": ["Adapter", "Strategy"],
    },
    {
        "name": "@synapse/workflow",
        "description": "Workflow automation with task management and conditional logic.",
        "category": "nextgen",
        "classes": [
            {"name": "WorkflowEngine", "description": "Runs workflow definitions", "methods": ["define", "run"]},
        ],
        "design_patterns": ["State", "Command"],
    },
    {
        "name": "@synapse/pwa",
        "description": "Service workers, offline support and push notifications.",
        "category": "futuristic",
        "classes": [
            {"name": "PWAManager", "description": "Registers service workers and manifests", "methods": ["register", "enableOffline"]},
        ],
        "design_patterns": ["Proxy", "Observer"],
    },
    {
        "name": "@synapse/webrtc",
        "description": "Video and audio streaming, screen sharing and peer-to-peer data transfer.",
        "category": "futuristic",
        "classes": [
            {"name": "PeerConnection", "description": "Wraps an RTC peer connection", "methods": ["connect", "send", "close"]},
        ],
        "design_patterns": ["Mediator", "Observer"],
    },
]

WIZARD = {
    "id": "synapse-getting-started",
    "title": "Synapse Framework Getting Started Wizard",
    "description": "Interactive step-by-step guide to get you started with Synapse",
    "user_preferences": {"experience": "beginner", "focus": "all", "language": "typescript"},
    "steps": [
        {
            "id": "welcome",
            "title": "Welcome to Synapse!",
            "description": "Let's get you started with the Synapse framework",
            "type": "interactive",
            "content": "This wizard will guide you through setting up your first Synapse application.",
        },
        {
            "id": "installation",
            "title": "Installation",
            "description": "Install Synapse and its dependencies",
            "type": "installation",
            "content": "Let's install Synapse and set up your development environment.",
            "code_example": """mkdir my-synapse-app
cd my-synapse-app
npm init -y
npm install @synapse/core @synapse/routing @synapse/database
npm install -D typescript @types/node tsx""",
        },
        {
            "id": "first-server",
            "title": "Your First Server",
            "description": "Create a simple HTTP server with Synapse",
            "type": "example",
            "content": "Now let's create your first Synapse server!",
            "code_example": """import { Server } from '@synapse/core';
import { Router } from '@synapse/routing';

const server = new Server({ port: 3000 });
const router = new Router();

router.get('/', (req, res) => {
  res.writeHead(200, { 'Content-Type': 'text/html' });
  res.end('<h1>Hello from Synapse!</h1>');
});

server.useRouter(router);
await server.start();""",
        },
        {
            "id": "database-setup",
            "title": "Database Integration",
            "description": "Add database functionality with the ORM",
            "type": "example",
            "content": "Let's add a model and store some records.",
            "code_example": """import { Database, Model } from '@synapse/database';

class User extends Model {
  static tableName = 'users';
  name: string = '';
}""",
        },
        {
            "id": "next-steps",
            "title": "Next Steps",
            "description": "Where to go from here",
            "type": "interactive",
            "content": "Explore the package reference, examples and tutorials to keep building.",
            "is_required": False,
        },
    ],
}
