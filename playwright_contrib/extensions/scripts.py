# ================================================================================
# Page Scripts
# ================================================================================
#
# JavaScript functions evaluated in the browser by the query/inspection
# extensions. Element scripts receive the element as their first argument;
# extra arguments arrive packed in a single array, matching Playwright's
# one-argument `evaluate(expression, arg)` calling convention.
#
# ================================================================================

# Element attributes

GET_ATTRIBUTE = "(element, name) => element.getAttribute(name)"
HAS_ATTRIBUTE = "(element, name) => element.hasAttribute(name)"

# Element content

INNER_HTML = "element => element.innerHTML"
OUTER_HTML = "element => element.outerHTML"
TEXT_CONTENT = "element => element.textContent"
INNER_TEXT = "element => element.innerText"
ELEMENT_HAS_CONTENT = "(element, content) => element.textContent.includes(content)"
ELEMENT_MATCHES_CONTENT = (
    "(element, [regex, flags]) => RegExp(regex, flags).test(element.textContent)"
)

# Element classes

CLASS_NAME = "element => element.className"
CLASS_LIST = "element => Array.from(element.classList)"
HAS_CLASS = "(element, className) => element.classList.contains(className)"

# Element state
# jQuery :visible / :hidden rule
IS_VISIBLE = (
    "element => !!(element.offsetWidth || element.offsetHeight"
    " || element.getClientRects().length)"
)
IS_SELECTED = "element => !!element.selected"
IS_CHECKED = "element => !!element.checked"
IS_DISABLED = "element => !!element.disabled"
IS_READ_ONLY = "element => !!element.readOnly"
IS_REQUIRED = "element => !!element.required"
HAS_FOCUS = "element => element === element.ownerDocument.activeElement"
# jQuery :empty rule, text nodes count as children
IS_EMPTY = "element => element.childNodes.length === 0"

# Page

PAGE_HAS_CONTENT = (
    "([regex, flags]) => RegExp(regex, flags).test(document.documentElement.textContent)"
)
PAGE_HAS_TITLE = "([regex, flags]) => RegExp(regex, flags).test(document.title)"
PAGE_HAS_URL = "([regex, flags]) => RegExp(regex, flags).test(document.location.href)"

QUERY_SELECTOR_WITH_CONTENT = """([selector, regex, flags]) => {
    const elements = document.querySelectorAll(selector);
    return Array.prototype.find.call(elements, element => RegExp(regex, flags).test(element.textContent)) || null;
}"""

QUERY_SELECTOR_ALL_WITH_CONTENT = """([selector, regex, flags]) => {
    const elements = document.querySelectorAll(selector);
    return Array.prototype.filter.call(elements, element => RegExp(regex, flags).test(element.textContent));
}"""

# Frame

ELEMENTS_REMOVED_FROM_DOM = "selector => document.querySelector(selector) === null"
