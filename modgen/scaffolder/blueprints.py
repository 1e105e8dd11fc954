"""Per-folder blueprints for generated module files.

Each ``Blueprint`` bundles the Jinja2 source of a folder's primary file, the
Jinja2 source of its aggregator ``index`` line, and the suffix used in the
primary file name.  Templates are rendered with the context built by
``TemplateRenderer.context_for``:

``name``
    The raw module name.
``pascal`` / ``camel`` / ``lower`` / ``kebab``
    Casing variants of the module name.
``folder`` / ``singular`` / ``singular_pascal``
    The folder being rendered and its singular forms.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Blueprint:
    """Template record for one module subfolder."""

    folder: str
    suffix: str
    body: str
    index: str


GENERIC_INDEX = (
    "export { {{ pascal }}{{ singular_pascal }} } from './{{ lower }}.{{ singular }}';\n"
)

MODULE_INDEX = """import { {{ lower }}Routes } from './routes';
import { Router } from 'express';

const {{ pascal }}Module = Router();

{{ pascal }}Module.use('/{{ lower }}', {{ lower }}Routes);

export { {{ pascal }}Module };
"""

# ---------------------------------------------------------------------------
# Primary file bodies
# ---------------------------------------------------------------------------

_CONTROLLER = """import { Request, Response } from 'express';
import { {{ pascal }}Service } from '../services';

export class {{ pascal }}Controller {
    private {{ lower }}Service: {{ pascal }}Service;

    constructor() {
        this.{{ lower }}Service = new {{ pascal }}Service();
    }
}"""

_MIDDLEWARE = """import { Request, Response, NextFunction } from 'express';

export const {{ pascal }}Middleware = (req: Request, res: Response, next: NextFunction) => {
    console.log(`{{ pascal }} Request - ${req.method} ${req.path}`);
    next();
}
"""

_ROUTE = """import { Router } from 'express';
import { {{ pascal }}Controller } from '../controllers';
import { {{ pascal }}Middleware } from '../middlewares';

const router = Router();
const {{ lower }}Controller = new {{ pascal }}Controller();

// Apply middleware
router.use({{ pascal }}Middleware);

// Test route to ensure the API is working
router.get('/ping', (req, res) => res.send('pong'));

export { router };"""

_SERVICE = """import { {{ pascal }}Repository } from '../repositories';

export class {{ pascal }}Service {
    private {{ lower }}Repository: {{ pascal }}Repository;

    constructor() {
        this.{{ lower }}Repository = new {{ pascal }}Repository();
    }
}"""

_REPOSITORY = """export class {{ pascal }}Repository {
    // Define repository methods here
}"""


BLUEPRINTS: dict[str, Blueprint] = {
    "controllers": Blueprint("controllers", "controller", _CONTROLLER, GENERIC_INDEX),
    "middlewares": Blueprint("middlewares", "middleware", _MIDDLEWARE, GENERIC_INDEX),
    "routes": Blueprint(
        "routes",
        "route",
        _ROUTE,
        "export { router as {{ lower }}Routes } from './{{ lower }}.route';\n",
    ),
    "services": Blueprint("services", "service", _SERVICE, GENERIC_INDEX),
    "repositories": Blueprint(
        "repositories",
        "repository",
        _REPOSITORY,
        "export { {{ pascal }}Repository } from './{{ lower }}.repository';\n",
    ),
}


def singularize(folder: str) -> str:
    """Drop a single trailing ``s`` from *folder*.

    Only correct for the default subfolders; irregular plurals are not
    handled.
    """
    return folder[:-1] if folder.endswith("s") else folder


def blueprint_for(folder: str) -> Blueprint:
    """Return the registered blueprint for *folder*.

    Unknown folders get an empty primary file, a suffix derived with
    ``singularize`` and the generic export line.
    """
    try:
        return BLUEPRINTS[folder]
    except KeyError:
        return Blueprint(folder, singularize(folder), "", GENERIC_INDEX)
