"""Static HTML templates for the console (served at / and /login)."""

BASE_CSS = r"""
    :root {
      --bg: #070a12;
      --panel: #0f1629;
      --panel-2: #111b31;
      --text: #e8eaf0;
      --muted: #9cb3d3;
      --accent: #6dd5fa;
      --danger: #ff6b6b;
      --success: #4ade80;
      --border: rgba(255, 255, 255, 0.08);
      --shadow: 0 14px 48px rgba(0, 0, 0, 0.4);
      --card-radius: 14px;
      --font: "Inter", "Segoe UI", system-ui, -apple-system, sans-serif;
    }
    * { box-sizing: border-box; }
    body {
      margin: 0;
      font-family: var(--font);
      background: linear-gradient(180deg, #0b1020 0%, #070a12 60%, #05060a 100%);
      color: var(--text);
      min-height: 100vh;
    }
    a { color: var(--accent); text-decoration: none; }
    .muted { color: var(--muted); }
    .card {
      background: var(--panel);
      border: 1px solid var(--border);
      border-radius: var(--card-radius);
      box-shadow: var(--shadow);
      padding: 20px;
    }
    label { display: grid; gap: 6px; font-size: 13px; color: var(--muted); }
    input[type=text], input[type=password], input[type=number] {
      background: var(--panel-2);
      border: 1px solid var(--border);
      border-radius: 10px;
      color: var(--text);
      padding: 10px 12px;
      font-size: 14px;
    }
    button {
      border: 1px solid var(--border);
      border-radius: 10px;
      padding: 9px 14px;
      font-weight: 600;
      cursor: pointer;
      background: var(--panel-2);
      color: var(--text);
    }
    button:disabled { opacity: 0.5; cursor: not-allowed; }
    button.primary { background: var(--accent); color: #051025; }
    button.danger { background: transparent; color: var(--danger); border-color: rgba(255,107,107,0.4); }
    .error { color: var(--danger); font-size: 13px; margin-top: 6px; }
    .hint { color: var(--muted); font-size: 13px; }
    code { background: rgba(255,255,255,0.06); padding: 2px 6px; border-radius: 6px; }
"""

LOGIN_HTML = r"""
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{{SITE_TITLE}} · Login</title>
  <style>
{{BASE_CSS}}
    .page { display: grid; place-items: center; min-height: 100vh; padding: 24px; }
    .card { width: 100%; max-width: 380px; }
    h1 { margin: 0 0 4px; font-size: 22px; }
    form { display: grid; gap: 14px; margin-top: 18px; }
  </style>
</head>
<body>
  <div class="page">
    <div class="card">
      <h1>{{SITE_TITLE}}</h1>
      <p class="muted">Enter the password to continue.</p>
      <form id="login-form">
        <label>Password
          <input type="password" id="password" placeholder="Password" autofocus />
        </label>
        <div class="error" id="login-error" hidden></div>
        <button type="submit" class="primary" id="login-btn">Log in</button>
      </form>
    </div>
  </div>
  <script>
    const form = document.getElementById("login-form");
    const errorEl = document.getElementById("login-error");
    const btn = document.getElementById("login-btn");

    function showError(msg) {
      errorEl.textContent = msg;
      errorEl.hidden = !msg;
    }

    form.addEventListener("submit", async (e) => {
      e.preventDefault();
      showError("");
      const password = document.getElementById("password").value;
      if (!password) {
        showError("Password is required.");
        return;
      }
      btn.disabled = true;
      btn.textContent = "Logging in...";
      try {
        const res = await fetch("/api/auth/login", {
          method: "POST",
          credentials: "include",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify({ password }),
        });
        const data = await res.json().catch(() => ({}));
        if (!res.ok) {
          showError(data.error || "Login failed.");
          return;
        }
        window.location.href = "/";
      } catch (err) {
        showError("Network error, please retry.");
      } finally {
        btn.disabled = false;
        btn.textContent = "Log in";
      }
    });
  </script>
</body>
</html>
"""

CONSOLE_INDEX_HTML = r"""
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{{SITE_TITLE}}</title>
  <style>
{{BASE_CSS}}
    .page { max-width: 920px; margin: 0 auto; padding: 28px 22px 48px; }
    header { display: flex; justify-content: space-between; align-items: center; gap: 14px; margin-bottom: 18px; }
    header h1 { margin: 0; font-size: 22px; }
    header p { margin: 4px 0 0; }
    .header-right { display: flex; gap: 12px; align-items: center; }
    form { display: grid; gap: 14px; }
    .row { display: flex; gap: 10px; align-items: center; flex-wrap: wrap; }
    .result { margin-top: 16px; padding: 14px; border-radius: 10px; background: var(--panel-2); }
    .list-header { display: flex; justify-content: space-between; align-items: center; }
    table { width: 100%; border-collapse: collapse; font-size: 13px; margin-top: 12px; }
    th, td { text-align: left; padding: 8px; border-bottom: 1px solid var(--border); vertical-align: top; word-break: break-all; }
    th { color: var(--muted); font-weight: 600; }
    footer { margin-top: 24px; }
    section + section { margin-top: 24px; }
  </style>
</head>
<body>
  <div class="page">
    <header>
      <div>
        <h1>{{SITE_TITLE}}</h1>
        <p class="muted">{{SITE_SUBTITLE}}</p>
      </div>
      <div class="header-right">
        <a href="{{HEADER_LINK_HREF}}" target="_blank" rel="noreferrer">{{HEADER_LINK_TEXT}}</a>
        <button id="logout-btn">Log out</button>
      </div>
    </header>

    <section class="card">
      <form id="create-form">
        <label>Path
          <input type="text" id="path" value="hello" />
        </label>
        <div class="error" id="path-error" hidden></div>
        <div class="hint">Short URL: <code id="short-url">—</code> <button type="button" id="copy-btn">Copy</button></div>
        <label>Target URL
          <input type="text" id="target-url" placeholder="https://example.com" value="https://example.com" />
        </label>
        <div class="error" id="url-error" hidden></div>
        <div class="row">
          <label class="row"><input type="checkbox" id="random-subdomain" /> Random subdomain</label>
          <label class="row">Length <input type="number" id="subdomain-length" min="3" max="32" value="8" disabled /></label>
        </div>
        <button type="submit" class="primary" id="create-btn">Create short link</button>
      </form>
      <div class="result" id="create-result" hidden></div>
    </section>

    <section class="card">
      <div class="list-header">
        <h2>Existing short links</h2>
        <button id="refresh-btn">Refresh</button>
      </div>
      <div class="row">
        <label class="row"><input type="checkbox" id="select-all" /> Select all</label>
        <button class="danger" id="batch-delete-btn" disabled>Delete selected (0)</button>
      </div>
      <div class="error" id="delete-error" hidden></div>
      <div class="error" id="list-error" hidden></div>
      <div id="list-body" class="hint">Loading...</div>
    </section>

    <footer class="hint">301 redirects are cached by browsers; avoid changing a path's target often.</footer>
  </div>
  <script>
    const CONFIG = {{CONFIG_JSON}};
    const state = { links: [], selected: new Set(), created: null, deleting: false };

    const $ = (id) => document.getElementById(id);

    function normalizePath(input) {
      let s = (input || "").trim();
      if (s.startsWith("/")) s = s.slice(1);
      return s.replace(/\/+$/, "");
    }
    function pathError(p) {
      if (!p) return "Path must not be empty.";
      if (p.length > 128) return "Path is too long (max 128).";
      if (p.includes("..")) return "Path must not contain '..'.";
      if (p.includes("//")) return "Path must not contain '//'.";
      if (p.startsWith("/")) return "Path must not start with '/'.";
      return "";
    }
    function urlError(u) {
      u = (u || "").trim();
      if (!u) return "Target URL must not be empty.";
      if (!(u.startsWith("https://") || u.startsWith("http://"))) return "Target URL must start with http:// or https://.";
      return "";
    }
    function shortUrl(p) {
      return p ? `${CONFIG.redirect_base_url}/${encodeURI(p)}` : "";
    }
    function setText(id, msg) {
      const el = $(id);
      el.textContent = msg || "";
      el.hidden = !msg;
    }
    function fmtDate(value) {
      if (!value) return "-";
      const d = new Date(value);
      return isNaN(d.getTime()) ? String(value) : d.toLocaleString();
    }
    function escapeHtml(s) {
      return String(s).replace(/[&<>"']/g, (c) => ({ "&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;" }[c]));
    }

    function refreshPreview() {
      const p = normalizePath($("path").value);
      $("short-url").textContent = shortUrl(p) || "—";
      setText("path-error", pathError(p));
      setText("url-error", urlError($("target-url").value));
    }

    async function onCreate(e) {
      e.preventDefault();
      const p = normalizePath($("path").value);
      const u = $("target-url").value.trim();
      if (pathError(p) || urlError(u)) {
        renderCreated({ error: "Form validation failed, check your input." });
        return;
      }
      const body = { path: p, targetUrl: u };
      if ($("random-subdomain").checked) {
        body.randomSubdomain = true;
        body.subdomainLength = parseInt($("subdomain-length").value, 10);
      }
      $("create-btn").disabled = true;
      try {
        const res = await fetch("/api/links", {
          method: "POST",
          credentials: "include",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify(body),
        });
        const data = await res.json().catch(() => ({}));
        if (!res.ok) {
          renderCreated(data && data.error ? data : { error: `Create failed: ${res.status}` });
          return;
        }
        renderCreated(data);
        await fetchLinks();
      } catch (err) {
        renderCreated({ error: "Network error", detail: String(err) });
      } finally {
        $("create-btn").disabled = false;
      }
    }

    function renderCreated(resp) {
      state.created = resp;
      const el = $("create-result");
      el.hidden = false;
      if (resp.error) {
        el.innerHTML = `<div class="error">${escapeHtml(resp.error)}${resp.detail ? " — " + escapeHtml(resp.detail) : ""}</div>`;
        return;
      }
      const url = shortUrl(resp.path);
      el.innerHTML = `
        <div>Created <code>${escapeHtml(resp.path)}</code> &rarr; <a href="${escapeHtml(resp.targetUrl || "")}" target="_blank" rel="noreferrer">${escapeHtml(resp.targetUrl || "")}</a></div>
        <div class="hint"><a href="${escapeHtml(url)}" target="_blank" rel="noreferrer">${escapeHtml(url)}</a></div>
        <div class="row" style="margin-top:10px"><button class="danger" id="delete-created-btn">Delete this link</button></div>`;
      $("delete-created-btn").addEventListener("click", onDeleteCreated);
    }

    async function onDeleteCreated() {
      if (!state.created || state.created.error) return;
      const p = state.created.path;
      if (!confirm(`Delete short link "${p}"?`)) return;
      setText("delete-error", "");
      try {
        const res = await fetch(`/api/links/${encodeURI(p)}`, { method: "DELETE", credentials: "include" });
        if (!res.ok) {
          const data = await res.json().catch(() => ({}));
          setText("delete-error", data.error || `Delete failed: ${res.status}`);
          return;
        }
        state.created = null;
        $("create-result").hidden = true;
        alert("Deleted.");
        await fetchLinks();
      } catch (err) {
        setText("delete-error", `Network error: ${err}`);
      }
    }

    async function fetchLinks() {
      $("refresh-btn").disabled = true;
      setText("list-error", "");
      try {
        const res = await fetch("/api/links", { credentials: "include" });
        const data = await res.json().catch(() => ({}));
        if (!res.ok) {
          setText("list-error", data.error || `Could not load links: ${res.status}`);
          state.links = [];
        } else {
          state.links = Array.isArray(data.items) ? data.items : [];
        }
      } catch (err) {
        setText("list-error", `Network error: ${err}`);
        state.links = [];
      } finally {
        $("refresh-btn").disabled = false;
      }
      state.selected = new Set([...state.selected].filter((p) => state.links.some((l) => l.path === p)));
      renderLinks();
    }

    function renderLinks() {
      const body = $("list-body");
      $("batch-delete-btn").textContent = `Delete selected (${state.selected.size})`;
      $("batch-delete-btn").disabled = state.deleting || state.selected.size === 0;
      $("select-all").checked = state.links.length > 0 && state.selected.size === state.links.length;
      if (!state.links.length) {
        body.className = "hint";
        body.textContent = "No short links yet.";
        return;
      }
      body.className = "";
      const rows = state.links.map((link) => {
        const url = shortUrl(link.path);
        const checked = state.selected.has(link.path) ? "checked" : "";
        return `<tr>
          <td><input type="checkbox" data-path="${escapeHtml(link.path)}" ${checked} /></td>
          <td><code>${escapeHtml(link.path)}</code></td>
          <td><a href="${escapeHtml(url)}" target="_blank" rel="noreferrer">${escapeHtml(url)}</a></td>
          <td><a href="${escapeHtml(link.targetUrl || "")}" target="_blank" rel="noreferrer">${escapeHtml(link.targetUrl || "")}</a></td>
          <td>${escapeHtml(fmtDate(link.createdAt))}</td>
          <td>${escapeHtml(fmtDate(link.updatedAt))}</td>
        </tr>`;
      }).join("");
      body.innerHTML = `<table>
        <thead><tr><th></th><th>Path</th><th>Short URL</th><th>Target URL</th><th>Created</th><th>Updated</th></tr></thead>
        <tbody>${rows}</tbody></table>`;
      body.querySelectorAll("input[data-path]").forEach((box) => {
        box.addEventListener("change", () => {
          const p = box.getAttribute("data-path");
          if (box.checked) state.selected.add(p); else state.selected.delete(p);
          renderLinks();
        });
      });
    }

    function toggleSelectAll() {
      if (state.selected.size === state.links.length) {
        state.selected = new Set();
      } else {
        state.selected = new Set(state.links.map((l) => l.path));
      }
      renderLinks();
    }

    async function onBatchDelete() {
      if (state.selected.size === 0) {
        alert("Select links to delete first.");
        return;
      }
      if (!confirm(`Delete ${state.selected.size} selected short link(s)?`)) return;
      state.deleting = true;
      setText("delete-error", "");
      renderLinks();
      const paths = Array.from(state.selected);
      try {
        const res = await fetch("/api/links/batch-delete", {
          method: "POST",
          credentials: "include",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify({ paths }),
        });
        const data = await res.json().catch(() => ({}));
        const failed = Array.isArray(data.failed) ? data.failed : (res.ok ? [] : paths);
        if (failed.length) {
          setText("delete-error", `Failed to delete: ${failed.join(", ")}`);
        } else {
          alert("Batch delete finished.");
        }
      } catch (err) {
        setText("delete-error", `Network error: ${err}`);
      } finally {
        state.deleting = false;
        state.selected = new Set();
      }
      await fetchLinks();
    }

    async function onLogout() {
      await fetch("/api/auth/logout", { method: "POST", credentials: "include" });
      window.location.href = "/login";
    }

    async function onCopy() {
      const url = shortUrl(normalizePath($("path").value));
      if (!url) return;
      await navigator.clipboard.writeText(url);
      $("copy-btn").textContent = "Copied";
      setTimeout(() => { $("copy-btn").textContent = "Copy"; }, 1200);
    }

    $("path").addEventListener("input", refreshPreview);
    $("target-url").addEventListener("input", refreshPreview);
    $("random-subdomain").addEventListener("change", () => {
      $("subdomain-length").disabled = !$("random-subdomain").checked;
    });
    $("create-form").addEventListener("submit", onCreate);
    $("copy-btn").addEventListener("click", onCopy);
    $("refresh-btn").addEventListener("click", fetchLinks);
    $("select-all").addEventListener("change", toggleSelectAll);
    $("batch-delete-btn").addEventListener("click", onBatchDelete);
    $("logout-btn").addEventListener("click", onLogout);

    refreshPreview();
    fetchLinks();
  </script>
</body>
</html>
"""
