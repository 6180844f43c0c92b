"""Pytest configuration and fixtures."""

import pytest

from classdoc.extraction import ClassDocExtractor


@pytest.fixture
def extractor() -> ClassDocExtractor:
    """Extractor with class recovery enabled."""
    return ClassDocExtractor(enable_recovery=True)


@pytest.fixture
def sample_class_code() -> str:
    """A documented class declaration that parses cleanly."""
    return '''
/**
 * @class ResourceLoader
 * @extends BaseNode
 * @classdesc Loads resources from a URL.
 */
class ResourceLoader extends BaseNode {
    /**
     * @description Creates a loader.
     * @param {String} path - Path to load
     */
    constructor (path) {
        super();
        this.path = path;
    }

    /**
     * Loads the resource.
     * @param {Object} options - Load options
     * @returns {Promise<String>} The loaded data
     * @throws Error when the request fails
     * @category Loading
     */
    async load (options) {
        return fetch(this.path);
    }

    /**
     * Creates a shared loader.
     * @category Factory
     * @since 2.0
     */
    static shared () {
        return new ResourceLoader(".");
    }

    _reset () {
        this.path = null;
    }
}
'''


@pytest.fixture
def sample_wrapped_class_code() -> str:
    """A class expression wrapped in an initializer call, with @member slots."""
    return '''"use strict";

/**
 * @module library.resources.files
 */

/**
 * @class SvResourceFile
 * @extends BaseNode
 * @classdesc Represents a resource file.
 */
(class SvResourceFile extends BaseNode {

    /**
     * @description Initializes the prototype slots.
     */
    initPrototypeSlots () {
        /**
         * @member {String} path - Path from index entry
         * @category File Properties
         */
        {
            const slot = this.newSlot("path", ".");
        }

        /**
         * @member {Number} resourceSize - Size from index entry
         * @category File Properties
         * @default 0
         */
        {
            const slot = this.newSlot("resourceSize", 0);
        }

        /**
         * @member {Error} error
         * @category Error Handling
         */
        {
            const slot = this.newSlot("error", null);
        }
    }

    /**
     * @description Returns the file path.
     * @returns {String} The path
     */
    filePath () {
        return this._path;
    }

}.initThisClass());
'''


@pytest.fixture
def sample_recoverable_code(sample_wrapped_class_code: str) -> str:
    """The wrapped class followed by a syntax error outside the class."""
    return sample_wrapped_class_code + "\nconst = ;\n"


@pytest.fixture
def sample_broken_code() -> str:
    """A class with unbalanced braces and no wrapper to recover from."""
    return '''
class Broken {
    load (path) {
        if (path) {
            return path;
    }

    static create (a, b) {
        return new Broken(
    }
'''
