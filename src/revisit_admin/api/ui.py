"""Single-page admin UI served by the API."""

ADMIN_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Category Admin</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      .hidden { display: none; }
      input { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .error { color: #c0392b; font-size: 0.8rem; }
      .grid { display: grid; grid-template-columns: repeat(auto-fill, 220px); gap: 1rem; }
      .card { border: 1px solid #ddd; border-radius: 8px; padding: 0.5rem; }
      .card img, #preview { width: 100%; height: 140px; object-fit: cover; }
      #toasts { position: fixed; top: 1rem; right: 1rem; }
      .toast { padding: 0.5rem 1rem; margin-bottom: 0.5rem; border-radius: 4px; }
      .toast.success { background: #e8f8ef; }
      .toast.error { background: #fdecea; }
    </style>
  </head>
  <body>
    <h1>Category Admin</h1>
    <div id="toasts"></div>

    <section id="auth-view">
      <div class="row"><input id="signup-name" placeholder="Name (signup only)" /></div>
      <div class="row"><input id="email" placeholder="Email" /></div>
      <div class="row"><input id="password" type="password" placeholder="Password" />
        <div class="error" id="signup-error-password"></div></div>
      <div class="row"><input id="confirm-password" type="password"
        placeholder="Confirm password (signup only)" />
        <div class="error" id="signup-error-confirm_password"></div></div>
      <div class="error" id="signup-error-name"></div>
      <div class="error" id="signup-error-email"></div>
      <button onclick="login()">Log in</button>
      <button onclick="signup()">Sign up</button>
    </section>

    <section id="dashboard-view" class="hidden">
      <div class="row">
        Signed in as <strong id="user-name"></strong>
        <button onclick="logout()">Log out</button>
      </div>
      <div class="row">
        <input id="search" placeholder="Search categories" oninput="loadCategories()" />
        <button onclick="openForm(null)">Add category</button>
      </div>
      <div id="categories" class="grid"></div>
    </section>

    <section id="form-view" class="hidden">
      <h2 id="form-title">Add New Category</h2>
      <div class="row"><input id="name" placeholder="e.g. Summer Collection" />
        <div class="error" id="error-name"></div></div>
      <div class="row"><input id="itemCount" type="number" min="0" placeholder="e.g. 42" />
        <div class="error" id="error-item_count"></div></div>
      <div class="row"><input id="imageUrl" placeholder="https://example.com/image.jpg"
        oninput="setPreview(this.value)" />
        <div class="error" id="error-image_url"></div></div>
      <div class="row"><input id="file" type="file" accept="image/*" onchange="upload(this)" /></div>
      <div class="row"><img id="preview" class="hidden" alt="Category Preview" /></div>
      <button onclick="closeForm()">Cancel</button>
      <button id="submit" onclick="submitForm()">Create Category</button>
    </section>

    <script>
      let editingId = null;
      let imagePreview = '';

      async function api(path, options) {
        const res = await fetch(path, Object.assign({
          headers: { 'Content-Type': 'application/json' }
        }, options || {}));
        await showToasts();
        return res;
      }

      async function showToasts() {
        const res = await fetch('/notifications');
        const data = await res.json();
        const box = document.getElementById('toasts');
        for (const note of data.notifications) {
          const el = document.createElement('div');
          el.className = 'toast ' + note.severity;
          el.textContent = note.message;
          box.appendChild(el);
          setTimeout(() => el.remove(), 3000);
        }
      }

      function show(view) {
        for (const id of ['auth-view', 'dashboard-view', 'form-view']) {
          document.getElementById(id).classList.toggle('hidden', id !== view);
        }
      }

      async function refreshSession() {
        const res = await fetch('/auth/session');
        const data = await res.json();
        if (data.authenticated) {
          document.getElementById('user-name').textContent = data.user.name;
          show('dashboard-view');
          await loadCategories();
        } else {
          show('auth-view');
        }
      }

      async function login() {
        await api('/auth/login', { method: 'POST', body: JSON.stringify({
          email: document.getElementById('email').value,
          password: document.getElementById('password').value
        }) });
        await refreshSession();
      }

      async function signup() {
        const res = await api('/auth/signup', { method: 'POST', body: JSON.stringify({
          name: document.getElementById('signup-name').value,
          email: document.getElementById('email').value,
          password: document.getElementById('password').value,
          confirmPassword: document.getElementById('confirm-password').value
        }) });
        const errors = res.status === 422 ? (await res.json()).detail : {};
        for (const field of ['name', 'email', 'password', 'confirm_password']) {
          document.getElementById('signup-error-' + field).textContent = errors[field] || '';
        }
        await refreshSession();
      }

      async function logout() {
        await api('/auth/logout', { method: 'POST' });
        await refreshSession();
      }

      async function loadCategories() {
        const query = encodeURIComponent(document.getElementById('search').value);
        const res = await fetch('/categories?search=' + query);
        if (res.status === 401) { show('auth-view'); return; }
        const data = await res.json();
        const grid = document.getElementById('categories');
        grid.innerHTML = '';
        if (!data.categories.length) {
          grid.textContent = 'No categories found.';
        }
        for (const category of data.categories) {
          const card = document.createElement('div');
          card.className = 'card';
          const img = document.createElement('img');
          img.src = category.imageUrl;
          const title = document.createElement('div');
          title.textContent = category.name + ' (' + category.itemCount + ' items)';
          const edit = document.createElement('button');
          edit.textContent = 'Edit';
          edit.onclick = () => openForm(category);
          const remove = document.createElement('button');
          remove.textContent = 'Delete';
          remove.onclick = () => deleteCategory(category.id);
          card.append(img, title, edit, remove);
          grid.appendChild(card);
        }
      }

      async function deleteCategory(id) {
        await api('/categories/' + encodeURIComponent(id), { method: 'DELETE' });
        await loadCategories();
      }

      function setPreview(value) {
        imagePreview = value;
        const img = document.getElementById('preview');
        img.src = value;
        img.classList.toggle('hidden', !value);
      }

      async function upload(input) {
        const file = input.files[0];
        if (!file) { return; }
        const res = await fetch('/categories/image-preview', {
          method: 'POST', headers: { 'Content-Type': file.type }, body: file
        });
        if (!res.ok) { return; }
        const data = await res.json();
        document.getElementById('imageUrl').value = '';
        setPreview(data.dataUri);
      }

      function openForm(category) {
        editingId = category ? category.id : null;
        document.getElementById('form-title').textContent =
          category ? 'Edit Category' : 'Add New Category';
        document.getElementById('submit').textContent =
          category ? 'Update Category' : 'Create Category';
        document.getElementById('name').value = category ? category.name : '';
        document.getElementById('itemCount').value = category ? category.itemCount : '';
        document.getElementById('imageUrl').value = category ? category.imageUrl : '';
        setPreview(category ? category.imageUrl : '');
        showErrors({});
        show('form-view');
      }

      function closeForm() {
        show('dashboard-view');
        loadCategories();
      }

      function showErrors(errors) {
        for (const field of ['name', 'item_count', 'image_url']) {
          document.getElementById('error-' + field).textContent = errors[field] || '';
        }
      }

      async function submitForm() {
        const button = document.getElementById('submit');
        button.disabled = true;
        button.textContent = editingId ? 'Updating...' : 'Creating...';
        const payload = {
          name: document.getElementById('name').value,
          itemCount: document.getElementById('itemCount').value,
          imageUrl: document.getElementById('imageUrl').value,
          imagePreview: imagePreview
        };
        const path = editingId ? '/categories/' + encodeURIComponent(editingId) : '/categories';
        const res = await api(path, {
          method: editingId ? 'PUT' : 'POST', body: JSON.stringify(payload)
        });
        button.disabled = false;
        button.textContent = editingId ? 'Update Category' : 'Create Category';
        if (res.status === 422) {
          const data = await res.json();
          showErrors(data.detail);
          return;
        }
        closeForm();
      }

      refreshSession();
    </script>
  </body>
</html>
"""
