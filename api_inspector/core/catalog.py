"""
Rule Catalog — Static table of API design rules and their sources.

Loaded once at import time and never mutated. The analyzer receives the
catalog and the source mapping by reference; nothing in a run writes to them.
"""

from __future__ import annotations

from types import MappingProxyType

from api_inspector.models.rule_models import DesignRule, RuleExamples, RuleSource, Severity


RULE_SOURCES: tuple[RuleSource, ...] = (
    RuleSource(
        id="all",
        name="All Sources (Comprehensive)",
        organization="Mixed",
        description="Validate against all available design guidelines from all sources.",
    ),
    RuleSource(
        id="google",
        name="Google Cloud API Design Guide",
        organization="Google",
        description="REST API design principles from Google Cloud Platform.",
        url="https://cloud.google.com/apis/design",
        rule_ids=frozenset({
            "rest-001", "rest-004", "error-001", "naming-001", "datatypes-001",
            "operations-001", "objects-001", "arrays-001", "performance-003",
        }),
    ),
    RuleSource(
        id="microsoft",
        name="Microsoft REST API Guidelines",
        organization="Microsoft",
        description="REST API guidelines from the Microsoft Azure team.",
        url="https://github.com/microsoft/api-guidelines",
        rule_ids=frozenset({
            "rest-002", "pagination-001", "validation-002", "response-003", "operations-003",
        }),
    ),
    RuleSource(
        id="owasp",
        name="OWASP API Security Top 10",
        organization="OWASP Foundation",
        description="Critical security risks and best practices for API security.",
        url="https://owasp.org/www-project-api-security/",
        rule_ids=frozenset({
            "security-001", "security-002", "security-003", "security-004",
            "security-005", "security-006", "validation-001", "arrays-002",
            "performance-006", "strings-001",
        }),
    ),
    RuleSource(
        id="ietf",
        name="IETF HTTP/1.1 Standards (RFC)",
        organization="Internet Engineering Task Force",
        description="Official HTTP protocol specifications and standards.",
        url="https://tools.ietf.org/html/rfc7231",
        rule_ids=frozenset({
            "http-001", "http-003", "idempotency-001", "performance-002",
            "performance-005", "datatypes-005", "nulls-001", "operations-002",
        }),
    ),
    RuleSource(
        id="jsonapi",
        name="JSON:API Specification",
        organization="JSON:API Community",
        description="Specification for building APIs in JSON with consistency and efficiency.",
        url="https://jsonapi.org/",
        rule_ids=frozenset({
            "filtering-001", "sorting-001", "response-001", "performance-001", "schema-002",
        }),
    ),
    RuleSource(
        id="openapi",
        name="OpenAPI Initiative",
        organization="Linux Foundation",
        description="Standard for describing and documenting REST APIs.",
        url="https://www.openapis.org/",
        rule_ids=frozenset({
            "doc-001", "doc-002", "datatypes-003", "parameters-002", "schema-001", "schema-003",
        }),
    ),
    RuleSource(
        id="w3c",
        name="W3C CORS Specification",
        organization="World Wide Web Consortium",
        description="Cross-Origin Resource Sharing standard for web APIs.",
        url="https://www.w3.org/TR/cors/",
        rule_ids=frozenset({"http-002", "parameters-001"}),
    ),
    RuleSource(
        id="stripe",
        name="Stripe API Best Practices",
        organization="Stripe",
        description="API design patterns from the payment industry.",
        url="https://stripe.com/docs/api",
        rule_ids=frozenset({"version-001"}),
    ),
    RuleSource(
        id="paypal",
        name="PayPal API Style Guide",
        organization="PayPal",
        description="RESTful API design standards from the PayPal engineering team.",
        url="https://github.com/paypal/api-standards",
        rule_ids=frozenset({"rest-005"}),
    ),
    RuleSource(
        id="github",
        name="GitHub REST API Best Practices",
        organization="GitHub",
        description="REST API patterns from one of the most-used developer platforms.",
        url="https://docs.github.com/en/rest",
        rule_ids=frozenset({"pagination-002"}),
    ),
    RuleSource(
        id="aws",
        name="AWS API Best Practices",
        organization="Amazon Web Services",
        description="Cloud API design principles from Amazon Web Services.",
        url="https://docs.aws.amazon.com/apigateway/",
        rule_ids=frozenset({"response-002"}),
    ),
    RuleSource(
        id="atlassian",
        name="Atlassian REST API Guidelines",
        organization="Atlassian",
        description="REST API design standards from the makers of Jira and Confluence.",
        url="https://developer.atlassian.com/server/framework/atlassian-sdk/rest-api-design-guidelines/",
        rule_ids=frozenset({"error-002"}),
    ),
    RuleSource(
        id="jsonschema",
        name="JSON Schema Specification",
        organization="JSON Schema Organization",
        description="Vocabulary for annotating and validating JSON documents.",
        url="https://json-schema.org/",
        rule_ids=frozenset({"schema-002", "strings-002"}),
    ),
    RuleSource(
        id="iso",
        name="ISO 8601 Date and Time Format",
        organization="International Organization for Standardization",
        description="International standard for date and time representation.",
        url="https://www.iso.org/iso-8601-date-and-time-format.html",
        rule_ids=frozenset({"datatypes-002"}),
    ),
    RuleSource(
        id="ieee",
        name="IEEE 754 Floating-Point Arithmetic",
        organization="IEEE",
        description="Standard for floating-point number representation.",
        url="https://standards.ieee.org/ieee/754/6210/",
        rule_ids=frozenset({"datatypes-004"}),
    ),
    RuleSource(
        id="sre",
        name="Site Reliability Engineering",
        organization="Google SRE",
        description="Reliability practices for production services.",
        url="https://sre.google/books/",
        rule_ids=frozenset({"performance-004"}),
    ),
    RuleSource(
        id="database",
        name="Database Performance Best Practices",
        organization="Industry",
        description="Query and data access patterns for responsive APIs.",
        url="https://use-the-index-luke.com/",
        rule_ids=frozenset({"performance-007"}),
    ),
    RuleSource(
        id="hateoas",
        name="HATEOAS (REST Maturity Level 3)",
        organization="Roy Fielding / REST",
        description="Hypermedia as the engine of application state.",
        url="https://martinfowler.com/articles/richardsonMaturityModel.html",
        rule_ids=frozenset({"response-004"}),
    ),
    RuleSource(
        id="designpatterns",
        name="API Design Patterns",
        organization="Manning / JJ Geewax",
        description="Reusable patterns for resource-oriented API design.",
        url="https://www.manning.com/books/api-design-patterns",
        rule_ids=frozenset({"parameters-003"}),
    ),
)

_SOURCES_BY_ID = {source.id: source for source in RULE_SOURCES}

# Filter key -> rule ids. "all" is handled by the selector and has no entry.
SOURCE_RULE_MAP: MappingProxyType[str, frozenset[str]] = MappingProxyType(
    {source.id: source.rule_ids for source in RULE_SOURCES if source.id != "all"}
)

# Attribution for rules listed by more than one source
_PREFERRED_SOURCE = {"schema-002": "jsonschema"}


def _attribution(rule_id: str) -> tuple[str, str]:
    source_id = _PREFERRED_SOURCE.get(rule_id)
    if source_id is None:
        source_id = next(
            (sid for sid, ids in SOURCE_RULE_MAP.items() if rule_id in ids), None
        )
    if source_id is None:
        return "", ""
    source = _SOURCES_BY_ID[source_id]
    return source.name, source.url


def _rule(
    rule_id: str,
    name: str,
    category: str,
    severity: Severity,
    description: str,
    rationale: str,
    impact: str,
    good: tuple[str, ...] = (),
    bad: tuple[str, ...] = (),
) -> DesignRule:
    source_name, source_url = _attribution(rule_id)
    return DesignRule(
        id=rule_id,
        name=name,
        category=category,
        severity=severity,
        description=description,
        rationale=rationale,
        impact=impact,
        source_name=source_name,
        source_url=source_url,
        examples=RuleExamples(good=good, bad=bad),
    )


DESIGN_RULES: tuple[DesignRule, ...] = (
    # ── REST Principles ──
    _rule(
        "rest-001", "Use Plural Nouns for Resource Names", "REST Principles", Severity.ERROR,
        "Resource endpoints should use plural nouns (e.g., /users, /products) instead of singular forms.",
        "Plural nouns indicate collections and provide consistency across the API.",
        "Singular nouns confuse developers and break the convention that GET /users returns "
        "many users while GET /users/1 returns one.",
        good=("/users", "/products", "/orders"),
        bad=("/user", "/product", "/order"),
    ),
    _rule(
        "rest-002", "Use HTTP Methods Correctly", "REST Principles", Severity.ERROR,
        "Use GET for retrieval, POST for creation, PUT/PATCH for updates, DELETE for deletion.",
        "HTTP methods have semantic meaning. Using them correctly makes the API self-documenting.",
        "Misusing HTTP methods breaks REST principles and can lead to caching issues, "
        "security vulnerabilities, and developer confusion.",
        good=("GET /users (retrieve)", "POST /users (create)", "PUT /users/1 (update)", "DELETE /users/1 (delete)"),
        bad=("GET /users/delete/1", "POST /users/get", "GET /users/update/1"),
    ),
    _rule(
        "rest-003", "Avoid Verbs in Endpoint Names", "REST Principles", Severity.WARNING,
        "Endpoints should represent resources (nouns), not actions (verbs).",
        "REST is resource-oriented. The action is conveyed through the HTTP method, not the URL.",
        "Verbs make the API less RESTful, lead to URL bloat and inconsistency.",
        good=("POST /users (create user)", "DELETE /users/1 (delete user)"),
        bad=("/createUser", "/deleteUser", "/getUser", "/updateUser"),
    ),
    _rule(
        "rest-004", "Use Hyphens for Multi-word Resources", "REST Principles", Severity.INFO,
        "Use hyphens (kebab-case) to separate words in URLs instead of underscores or camelCase.",
        "Hyphens are more readable in URLs and are the standard convention.",
        "Minor usability impact. Inconsistent naming can cause confusion.",
        good=("/user-profiles", "/order-items"),
        bad=("/user_profiles", "/userProfiles", "/OrderItems"),
    ),
    _rule(
        "rest-005", "Implement Proper Nesting for Related Resources", "REST Principles", Severity.WARNING,
        "Nested resources should represent relationships, but avoid deep nesting (max 2 levels).",
        "Nesting shows relationships but deep nesting makes URLs complex and hard to manage.",
        "Deep nesting creates complexity and tight coupling between resources.",
        good=("/users/1/posts", "/posts/1/comments"),
        bad=("/users/1/posts/1/comments/1/replies/1",),
    ),
    # ── HTTP Standards ──
    _rule(
        "http-001", "Return Appropriate HTTP Status Codes", "HTTP Standards", Severity.ERROR,
        "Use standard status codes: 200 for success, 201 for creation, 204 for empty deletes, "
        "400 for client errors, 500 for server errors.",
        "Status codes are standardized and help clients handle responses appropriately.",
        "Incorrect status codes break client error handling, caching, and monitoring.",
        good=("201 Created", "204 No Content", "404 Not Found"),
        bad=("Returning 200 with error message", "Always returning 200"),
    ),
    _rule(
        "http-002", "Implement CORS Headers", "HTTP Standards", Severity.WARNING,
        "Include CORS headers and answer OPTIONS preflight requests for authorized origins.",
        "CORS headers are necessary for web applications to access the API from other domains.",
        "Missing CORS support prevents browser applications from using the API.",
        good=("Access-Control-Allow-Origin: *", "Access-Control-Allow-Methods: GET, POST, PUT, DELETE"),
        bad=("No CORS headers", "OPTIONS returns 405"),
    ),
    _rule(
        "http-003", "Support Content Negotiation", "HTTP Standards", Severity.INFO,
        "Honor Accept and Content-Type headers for content negotiation.",
        "Content negotiation allows clients to request data in their preferred format.",
        "Lack of content negotiation limits API flexibility and client compatibility.",
        good=("Accept: application/json", "Content-Type: application/json"),
        bad=("Ignoring Accept header", "Returning HTML to a JSON client"),
    ),
    # ── Versioning ──
    _rule(
        "version-001", "Include API Version in URL or Header", "Versioning", Severity.ERROR,
        "APIs should be versioned in the URL (e.g., /v1/) or a header to allow changes without "
        "breaking existing clients.",
        "Versioning allows the API to evolve while maintaining backward compatibility.",
        "Without versioning, breaking changes will break all existing clients.",
        good=("/v1/users", "/api/v2/products", "API-Version: 1"),
        bad=("/users (no version)", "Version in query param"),
    ),
    # ── Security ──
    _rule(
        "security-001", "Use HTTPS for All Endpoints", "Security", Severity.ERROR,
        "All API endpoints must use HTTPS to encrypt data in transit.",
        "HTTPS prevents man-in-the-middle attacks and protects sensitive data.",
        "HTTP exposes data to interception and tampering.",
        good=("https://api.example.com",),
        bad=("http://api.example.com",),
    ),
    _rule(
        "security-002", "Implement Authentication and Authorization", "Security", Severity.ERROR,
        "APIs should require authentication (OAuth, JWT, API keys) and implement authorization checks.",
        "Authentication verifies identity; authorization controls access to resources.",
        "Missing authentication allows unauthorized access to and modification of data.",
        good=("Bearer token", "API key", "OAuth 2.0"),
        bad=("No authentication", "Authentication in URL"),
    ),
    _rule(
        "security-003", "Implement Rate Limiting", "Security", Severity.WARNING,
        "APIs should implement rate limiting and advertise limits in response headers.",
        "Rate limiting protects against abuse and ensures service availability.",
        "Without rate limiting, the API is vulnerable to abuse and overload.",
        good=("X-RateLimit-Limit: 1000", "X-RateLimit-Remaining: 999", "429 Too Many Requests"),
        bad=("No rate limiting", "No rate limit headers"),
    ),
    _rule(
        "security-004", "Enforce HTTP Strict Transport Security", "Security", Severity.WARNING,
        "HTTPS APIs should send a Strict-Transport-Security header.",
        "HSTS tells clients never to downgrade to plain HTTP.",
        "Without HSTS, clients can be tricked into insecure connections by downgrade attacks.",
        good=("Strict-Transport-Security: max-age=31536000; includeSubDomains",),
        bad=("No Strict-Transport-Security header",),
    ),
    _rule(
        "security-005", "Prevent MIME Type Sniffing", "Security", Severity.WARNING,
        "Responses should carry X-Content-Type-Options: nosniff.",
        "Disabling content sniffing stops browsers from reinterpreting response bodies.",
        "Sniffed responses can be executed as scripts, enabling cross-site scripting.",
        good=("X-Content-Type-Options: nosniff",),
        bad=("No X-Content-Type-Options header",),
    ),
    _rule(
        "security-006", "Avoid Disclosing Server Versions", "Security", Severity.INFO,
        "Server and X-Powered-By headers should not reveal software versions.",
        "Version banners help attackers pick known exploits.",
        "Disclosed versions make targeted attacks cheaper.",
        good=("Server: nginx",),
        bad=("Server: Apache/2.4.1 (Unix)", "X-Powered-By: PHP/7.2.1"),
    ),
    # ── Data Management ──
    _rule(
        "pagination-001", "Implement Pagination for Collections", "Data Management", Severity.WARNING,
        "Large collections should be paginated using limit/offset or cursor-based pagination.",
        "Pagination prevents returning huge datasets that can overwhelm clients and servers.",
        "Without pagination, responses can be extremely large and slow.",
        good=("/users?limit=20&offset=0", "/users?page=1&per_page=20", "/users?cursor=abc123"),
        bad=("Returning all records", "No pagination support"),
    ),
    _rule(
        "pagination-002", "Include Pagination Metadata", "Data Management", Severity.INFO,
        "Paginated responses should include metadata (total count, current page, next/previous links).",
        "Metadata helps clients navigate through paginated data efficiently.",
        "Missing metadata makes it harder for clients to implement pagination.",
        good=("{ data: [...], total: 100, page: 1, per_page: 20 }", 'Link: <...>; rel="next"'),
        bad=("Only returning data array", "No navigation links"),
    ),
    _rule(
        "filtering-001", "Support Filtering via Query Parameters", "Data Management", Severity.INFO,
        "Allow clients to filter collections using query parameters.",
        "Filtering reduces data transfer and improves performance.",
        "Without filtering, clients must fetch all data and filter locally.",
        good=("/users?status=active", "/products?category=electronics&price_min=100"),
        bad=("No filtering support", "Filtering requires POST with body"),
    ),
    _rule(
        "sorting-001", "Support Sorting via Query Parameters", "Data Management", Severity.INFO,
        "Allow clients to sort collections using query parameters.",
        "Server-side sorting is more efficient than client-side sorting.",
        "Without sorting, clients must sort large datasets locally.",
        good=("/users?sort=name", "/products?sort=-price"),
        bad=("No sorting support", "Hardcoded sort order"),
    ),
    # ── Error Handling ──
    _rule(
        "error-001", "Return Consistent Error Response Format", "Error Handling", Severity.ERROR,
        "Errors should follow a consistent structure with error code, message, and optional details.",
        "Consistent error format makes error handling predictable for clients.",
        "Inconsistent errors make it hard for clients to handle errors properly.",
        good=('{ error: { code: "INVALID_INPUT", message: "Email is required", field: "email" }}',),
        bad=("Different formats for different errors", "Only returning status code"),
    ),
    _rule(
        "error-002", "Provide Meaningful Error Messages", "Error Handling", Severity.WARNING,
        "Error messages should be clear, actionable, and helpful for debugging.",
        "Good error messages help developers quickly identify and fix issues.",
        "Vague errors lead to confusion and longer debugging times.",
        good=('"Email address is invalid: must contain @"',),
        bad=('"Error"', '"Bad request"', '"Something went wrong"'),
    ),
    # ── Documentation ──
    _rule(
        "doc-001", "Provide API Documentation", "Documentation", Severity.ERROR,
        "APIs should have comprehensive documentation (OpenAPI/Swagger, or similar).",
        "Documentation is essential for developers to understand and use the API.",
        "Lack of documentation makes the API difficult to use and adopt.",
        good=("OpenAPI/Swagger spec", "Interactive API explorer"),
        bad=("No documentation", "Outdated docs"),
    ),
    _rule(
        "doc-002", "Include Examples in Documentation", "Documentation", Severity.INFO,
        "Documentation should include request/response examples for each endpoint.",
        "Examples help developers understand how to use the API quickly.",
        "Without examples, developers have to guess the correct request format.",
        good=("Request/response samples", "Code examples in multiple languages"),
        bad=("No examples", "Only showing request format"),
    ),
    # ── Response Design ──
    _rule(
        "response-001", "Use Consistent Response Structure", "Response Design", Severity.WARNING,
        "All responses should follow a consistent structure (e.g., always wrapping data in a data field).",
        "Consistency makes the API predictable and easier to use.",
        "Inconsistent responses require special handling for different endpoints.",
        good=("{ data: {...} } for all successful responses",),
        bad=("Sometimes { user: {...} }, sometimes { data: {...} }",),
    ),
    _rule(
        "response-002", "Include Metadata in Responses", "Response Design", Severity.INFO,
        "Responses should include relevant metadata (timestamps, request IDs, etc.).",
        "Metadata aids in debugging, monitoring, and tracking.",
        "Missing metadata makes troubleshooting harder.",
        good=('{ data: {...}, meta: { timestamp: "...", requestId: "..." } }',),
        bad=("Only returning data without metadata",),
    ),
    _rule(
        "response-003", "Return Appropriate Responses per Operation", "Response Design", Severity.WARNING,
        "POST returns 201 with a Location header, DELETE returns 204, GET and PUT return the resource.",
        "Predictable responses per operation let clients act without extra requests.",
        "Clients cannot rely on created or updated representations.",
        good=("POST /users -> 201 + Location", "DELETE /users/1 -> 204"),
        bad=("POST /users -> 200 with empty body",),
    ),
    _rule(
        "response-004", "Include Hypermedia Links (HATEOAS)", "Response Design", Severity.INFO,
        "Include links (_links) to related resources and available actions in responses.",
        "Hypermedia makes the API discoverable and decouples clients from URL construction.",
        "Clients hard-code URLs and break when the URL structure changes.",
        good=('{ id: 1, _links: { self: { href: "/users/1" } } }',),
        bad=("Responses without any links",),
    ),
    # ── Naming Conventions ──
    _rule(
        "naming-001", "Use Consistent Naming Convention", "Naming Conventions", Severity.WARNING,
        "Field names should follow a consistent convention (camelCase or snake_case, not mixed).",
        "Consistency improves readability and reduces errors.",
        "Mixed conventions confuse developers and require extra mapping logic.",
        good=("userName, firstName (camelCase)", "user_name, first_name (snake_case)"),
        bad=("userName, first_name (mixed)",),
    ),
    # ── API Design ──
    _rule(
        "idempotency-001", "Ensure Idempotency for Safe Operations", "API Design", Severity.WARNING,
        "GET, PUT, DELETE should be idempotent. POST may not be idempotent unless using idempotency keys.",
        "Idempotency prevents duplicate operations and ensures reliability.",
        "Non-idempotent operations can cause duplicate data or actions on retries.",
        good=("GET, PUT, DELETE are idempotent", "POST with Idempotency-Key header"),
        bad=("PUT creating new resources", "DELETE having side effects"),
    ),
    # ── Performance ──
    _rule(
        "performance-001", "Support Field Selection/Sparse Fieldsets", "Performance", Severity.INFO,
        "Allow clients to request only specific fields to reduce payload size.",
        "Field selection reduces bandwidth and improves performance.",
        "Always returning full objects wastes bandwidth and slows down responses.",
        good=("/users?fields=id,name,email",),
        bad=("Always returning all fields",),
    ),
    _rule(
        "performance-002", "Implement Caching Headers", "Performance", Severity.WARNING,
        "Use caching headers (Cache-Control, ETag) for cacheable resources.",
        "Caching reduces server load and improves response times.",
        "Without caching, clients make unnecessary requests.",
        good=("Cache-Control: max-age=3600", 'ETag: "abc123"', "304 Not Modified"),
        bad=("No caching headers", "Cache-Control: no-cache for everything"),
    ),
    _rule(
        "performance-003", "Enable Response Compression", "Performance", Severity.INFO,
        "Compress responses with gzip or brotli and declare it with Content-Encoding.",
        "Compression cuts bandwidth for JSON payloads substantially.",
        "Uncompressed responses are slower for clients on constrained networks.",
        good=("Content-Encoding: gzip", "Content-Encoding: br"),
        bad=("No Content-Encoding on large JSON responses",),
    ),
    _rule(
        "performance-004", "Set Timeouts and Service Level Objectives", "Performance", Severity.INFO,
        "Define latency objectives and enforce server-side timeouts for every operation.",
        "Explicit timeouts keep slow dependencies from exhausting the service.",
        "Requests pile up and cascade into outages.",
        good=("p99 latency < 300ms", "Upstream timeout of 5s"),
        bad=("No timeouts on downstream calls",),
    ),
    _rule(
        "performance-005", "Support Conditional Requests", "Performance", Severity.INFO,
        "Honor If-None-Match and If-Modified-Since and answer 304 Not Modified.",
        "Conditional requests avoid re-sending unchanged representations.",
        "Clients re-download full payloads on every poll.",
        good=("If-None-Match -> 304 Not Modified",),
        bad=("Ignoring conditional request headers",),
    ),
    _rule(
        "performance-006", "Limit Request and Response Payload Size", "Performance", Severity.WARNING,
        "Enforce maximum payload sizes and return 413 for oversized requests.",
        "Payload limits protect the service from resource exhaustion.",
        "Unbounded payloads enable denial-of-service through huge requests.",
        good=("413 Payload Too Large", "1MB request limit"),
        bad=("Accepting arbitrarily large bodies",),
    ),
    _rule(
        "performance-007", "Avoid N+1 Query Patterns", "Performance", Severity.INFO,
        "Offer embedding or batch retrieval so clients do not need one request per related item.",
        "Batching related data keeps request counts and database load low.",
        "Clients issue hundreds of requests to render a single view.",
        good=("/posts?include=author", "/users?ids=1,2,3"),
        bad=("One request per related resource",),
    ),
    # ── Data Types ──
    _rule(
        "datatypes-001", "Use Consistent Data Types", "Data Types", Severity.WARNING,
        "The same field must always have the same type (e.g., IDs always strings or always integers).",
        "Consistent types allow clients to deserialize responses reliably.",
        "Type changes between records break strongly typed clients.",
        good=('{ "id": "1" }, { "id": "2" }',),
        bad=('{ "id": 1 }, { "id": "2" }',),
    ),
    _rule(
        "datatypes-002", "Use ISO 8601 for Dates and Times", "Data Types", Severity.WARNING,
        "Date and time fields should use ISO 8601 (YYYY-MM-DDTHH:mm:ssZ) with timezone information.",
        "ISO 8601 is unambiguous, sortable, and supported by every platform.",
        "Custom date formats and epoch numbers are misinterpreted across locales.",
        good=("2024-01-15T10:30:00Z",),
        bad=("01/15/2024", "1705314600", "Jan 15, 2024"),
    ),
    _rule(
        "datatypes-003", "Define Schemas for Request and Response Bodies", "Data Types", Severity.INFO,
        "Provide JSON Schema or OpenAPI schema definitions for all request/response bodies.",
        "Schemas enable validation, documentation, and client code generation.",
        "Without schemas, clients guess the shape of payloads.",
        good=("components.schemas.User in the OpenAPI document",),
        bad=("Undocumented free-form payloads",),
    ),
    _rule(
        "datatypes-004", "Use Appropriate Numeric Types", "Data Types", Severity.WARNING,
        "Use integers for counts and IDs; avoid floats for currency (use strings or integer cents).",
        "Binary floating point cannot represent most decimal amounts exactly.",
        "Rounding errors in monetary values cause accounting discrepancies.",
        good=('{ "price_cents": 1999 }', '{ "price": "19.99" }'),
        bad=('{ "price": 19.99 }',),
    ),
    _rule(
        "datatypes-005", "Use Native Boolean Types", "Data Types", Severity.WARNING,
        "Use true/false instead of strings (\"true\"/\"false\") or numbers (0/1).",
        "Native booleans are unambiguous in every JSON parser.",
        "Surrogate booleans produce truthiness bugs (\"false\" is truthy).",
        good=('{ "isActive": true }',),
        bad=('{ "isActive": "true" }', '{ "isActive": 1 }'),
    ),
    # ── Validation ──
    _rule(
        "validation-001", "Validate All Input", "Validation", Severity.ERROR,
        "Validate required fields, data types, formats, ranges, and business rules on every request.",
        "Input validation is the first line of defense against bad data and injection.",
        "Unvalidated input corrupts data and opens injection vulnerabilities.",
        good=("400 Bad Request for missing required fields",),
        bad=("Accepting an empty body on create",),
    ),
    _rule(
        "validation-002", "Return Field-Level Validation Errors", "Validation", Severity.WARNING,
        "When validation fails, return which fields failed and why.",
        "Field-level errors let clients fix requests without guesswork.",
        "Generic validation failures slow down integration.",
        good=('{ errors: [{ field: "email", message: "must be a valid email" }] }',),
        bad=('{ error: "Validation failed" }',),
    ),
    _rule(
        "strings-001", "Limit String Lengths", "Validation", Severity.WARNING,
        "Define minLength and maxLength constraints on string fields.",
        "Length limits keep payloads bounded and storage predictable.",
        "Unbounded strings enable resource exhaustion and storage abuse.",
        good=("name: maxLength 255",),
        bad=("Free-text fields with no length limit",),
    ),
    _rule(
        "strings-002", "Use Format Constraints for Structured Strings", "Validation", Severity.INFO,
        "Use formats (email, uri, uuid, date-time) for structured strings.",
        "Format constraints keep structured values machine-usable.",
        "Malformed emails and URLs leak into downstream systems.",
        good=('"email": "jane@example.com"', '"website": "https://example.com"'),
        bad=('"email": "jane at example"', '"website": "example.com"'),
    ),
    _rule(
        "arrays-002", "Limit Array Sizes", "Validation", Severity.WARNING,
        "Set maximum array sizes (e.g., maxItems: 1000) for request and response collections.",
        "Bounded arrays keep processing time and memory predictable.",
        "Unbounded arrays enable resource exhaustion attacks.",
        good=("maxItems: 100 with pagination",),
        bad=("Returning thousands of items in one response",),
    ),
    # ── Operations ──
    _rule(
        "operations-001", "Provide Bulk Operations", "Operations", Severity.INFO,
        "Offer bulk endpoints (e.g., POST /users/bulk) for creating or updating many items.",
        "Bulk operations reduce round trips for batch workloads.",
        "Clients send one request per item, multiplying latency and load.",
        good=("POST /users/bulk",),
        bad=("Looping single-item POSTs",),
    ),
    _rule(
        "operations-002", "Support Partial Updates with PATCH", "Operations", Severity.INFO,
        "Support PATCH for partial updates so clients can change specific fields.",
        "PATCH avoids sending and overwriting the whole resource.",
        "Clients risk lost updates when replacing full resources.",
        good=("PATCH /users/1 { email }",),
        bad=("PUT required for every change",),
    ),
    _rule(
        "operations-003", "Use Asynchronous Patterns for Long-Running Operations", "Operations", Severity.INFO,
        "Return 202 Accepted with a status endpoint for long-running operations.",
        "Async patterns keep requests short and let clients poll progress.",
        "Long requests time out and leave work in an unknown state.",
        good=("202 Accepted + Location: /jobs/42",),
        bad=("Holding the connection open for minutes",),
    ),
    # ── Schema Design ──
    _rule(
        "schema-001", "Distinguish Optional and Nullable Fields", "Schema Design", Severity.INFO,
        "Clearly distinguish optional fields (can be omitted) from nullable fields (can be null).",
        "Clients need to know whether absence and null mean different things.",
        "Ambiguous optionality leads to incorrect updates and null handling bugs.",
        good=("nullable: true vs. not required",),
        bad=("Undocumented null semantics",),
    ),
    _rule(
        "schema-002", "Define Value Constraints", "Schema Design", Severity.INFO,
        "Define min/max constraints for numbers, string lengths, and array sizes.",
        "Constraints document valid values and enable validation.",
        "Clients discover limits only through failures.",
        good=("minimum: 0, maximum: 100", "maxLength: 255"),
        bad=("Unconstrained numeric fields",),
    ),
    _rule(
        "schema-003", "Use Enums for Fixed Value Sets", "Schema Design", Severity.INFO,
        "Use enum types with consistent casing for fields with fixed value sets.",
        "Enums enforce valid values and document the allowed set.",
        "Free-form values drift in spelling and casing over time.",
        good=('"status": "ACTIVE"',),
        bad=('"status": "Active "', '"status": "active-ish"'),
    ),
    _rule(
        "objects-001", "Limit Object Nesting Depth", "Schema Design", Severity.INFO,
        "Group related fields in nested objects, but limit nesting to 3-4 levels.",
        "Shallow structures are easier to consume and evolve.",
        "Deeply nested payloads are hard to navigate and map.",
        good=("user.address.city",),
        bad=("a.b.c.d.e.f",),
    ),
    _rule(
        "arrays-001", "Always Return Arrays for Collections", "Schema Design", Severity.WARNING,
        "Collection endpoints must always return arrays, even for empty or single-item results.",
        "A stable collection shape keeps client code simple.",
        "Clients must special-case empty or single results.",
        good=("[]", "[{...}]"),
        bad=("null for empty collections", "an object for a single item"),
    ),
    _rule(
        "nulls-001", "Handle Nulls Consistently", "Schema Design", Severity.INFO,
        "Either always omit null fields or always include them, and document the policy.",
        "A consistent null policy lets clients treat absence uniformly.",
        "Mixed null handling produces defensive, error-prone client code.",
        good=("Omit unset fields everywhere",),
        bad=("Some unset fields null, others omitted",),
    ),
    # ── Parameters ──
    _rule(
        "parameters-001", "Use Query Parameters for Options", "Parameters", Severity.INFO,
        "Use query parameters for optional filters and options, not path segments or GET bodies.",
        "Query parameters are cache-friendly and self-describing.",
        "Options in paths or bodies complicate caching and routing.",
        good=("/users?role=admin",),
        bad=("/users/role/admin", "GET with a JSON body"),
    ),
    _rule(
        "parameters-002", "Document Parameter Types and Constraints", "Parameters", Severity.INFO,
        "Document every parameter's type, format, constraints, and examples.",
        "Documented parameters prevent trial-and-error integration.",
        "Clients send invalid parameters and misread defaults.",
        good=("limit: integer, 1-100, default 20",),
        bad=("Undocumented query parameters",),
    ),
    _rule(
        "parameters-003", "Provide Sensible Parameter Defaults", "Parameters", Severity.INFO,
        "Provide and document defaults for optional parameters (e.g., limit=20).",
        "Defaults make the common case work without configuration.",
        "Missing defaults produce unpredictable result sizes.",
        good=("limit defaults to 20", "sort defaults to created_at:desc"),
        bad=("Unbounded results when limit is omitted",),
    ),
)
