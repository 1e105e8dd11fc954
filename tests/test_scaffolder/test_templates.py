"""Tests for primary file rendering (TemplateRenderer)."""

from __future__ import annotations

import pytest

from modgen.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestContext:
    def test_context_for_module_and_folder(self):
        context = TemplateRenderer.context_for("blog_post", "services")
        assert context["name"] == "blog_post"
        assert context["pascal"] == "BlogPost"
        assert context["camel"] == "blogPost"
        assert context["lower"] == "blog_post"
        assert context["singular"] == "service"
        assert context["singular_pascal"] == "Service"

    def test_context_without_folder(self):
        context = TemplateRenderer.context_for("user")
        assert context["folder"] == ""
        assert context["singular_pascal"] == ""

    def test_casing_filters_registered(self, renderer):
        assert renderer.render_string("{{ name|pascal_case }}", {"name": "a_b"}) == "AB"
        assert renderer.render_string("{{ name|camel_case }}", {"name": "a_b"}) == "aB"
        assert renderer.render_string("{{ name|kebab_case }}", {"name": "AB c"}) == "ab c"


class TestRender:
    def test_repository_exact(self, renderer):
        assert renderer.render("user", "repositories") == (
            "export class UserRepository {\n    // Define repository methods here\n}"
        )

    def test_controller_exact(self, renderer):
        assert renderer.render("user", "controllers") == (
            "import { Request, Response } from 'express';\n"
            "import { UserService } from '../services';\n"
            "\n"
            "export class UserController {\n"
            "    private userService: UserService;\n"
            "\n"
            "    constructor() {\n"
            "        this.userService = new UserService();\n"
            "    }\n"
            "}"
        )

    def test_middleware_logs_method_and_path(self, renderer):
        content = renderer.render("blog_post", "middlewares")
        assert "export const BlogPostMiddleware = (req: Request, res: Response, next: NextFunction) => {" in content
        assert "console.log(`BlogPost Request - ${req.method} ${req.path}`);" in content
        assert "    next();\n" in content
        assert content.endswith("}\n")

    def test_route_registers_ping_and_exports_router(self, renderer):
        content = renderer.render("user", "routes")
        assert "const router = Router();" in content
        assert "const userController = new UserController();" in content
        assert "router.use(UserMiddleware);" in content
        assert "router.get('/ping', (req, res) => res.send('pong'));" in content
        assert content.endswith("export { router };")

    def test_service_holds_repository(self, renderer):
        content = renderer.render("blog_post", "services")
        assert "import { BlogPostRepository } from '../repositories';" in content
        assert "export class BlogPostService {" in content
        assert "private blog_postRepository: BlogPostRepository;" in content
        assert "this.blog_postRepository = new BlogPostRepository();" in content

    def test_unknown_folder_is_empty(self, renderer):
        assert renderer.render("user", "models") == ""

    def test_deterministic(self, renderer):
        assert renderer.render("user", "routes") == TemplateRenderer().render("user", "routes")
